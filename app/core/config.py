# app/core/config.py
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    PROJECT_NAME: str = "payment-instructions"
    VERSION: str = "1.0.0"

    # Currencies a payment instruction may be denominated in
    SUPPORTED_CURRENCIES: List[str] = ["NGN", "USD", "GBP", "GHS"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Debug mode
    DEBUG: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
