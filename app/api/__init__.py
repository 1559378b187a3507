# app/api/__init__.py
from fastapi import APIRouter
from app.api import payment_instructions

api_router = APIRouter()

api_router.include_router(payment_instructions.router)

__all__ = ["payment_instructions", "api_router"]
