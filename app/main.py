from fastapi import FastAPI
import logging

from app.core.config import settings
from app.health import add_health_endpoint
from app.api import api_router

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Payment Instruction Processor",
    description="Parses free-text DEBIT/CREDIT payment instructions and executes or schedules them",
    version=settings.VERSION,
    debug=settings.DEBUG
)

add_health_endpoint(app)

app.include_router(api_router)

logger.info(f"🚀 {settings.PROJECT_NAME} {settings.VERSION} ready, currencies: {', '.join(settings.SUPPORTED_CURRENCIES)}")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
