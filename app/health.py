# app/health.py
from fastapi import FastAPI
from datetime import datetime, timezone
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

def add_health_endpoint(app: FastAPI):
    @app.get("/health", summary="Health Check", tags=["Health"])
    async def health_check():
        logger.debug("Health check requested")
        return {
            "status": "healthy",
            "supported_currencies": settings.SUPPORTED_CURRENCIES,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION
        }

    @app.get("/", summary="Root Endpoint", tags=["Health"])
    async def root():
        return {
            "message": "Payment Instruction Processor",
            "status": "operational",
            "version": settings.VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
