# run.py

import logging
import uvicorn

from app.core.config import settings

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# PORT from the environment overrides the default via settings
port = settings.PORT

if __name__ == "__main__":
    logger.info(f"🚀 Starting FastAPI server on port {port}...")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=port,
        reload=False,
        log_level=settings.LOG_LEVEL.lower()
    )
