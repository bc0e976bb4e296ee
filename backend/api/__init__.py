"""
Backend API package initialization.

This package contains FastAPI router modules for the calculator backend:
- calculator: Leakage, lead scoring, validation, confidence and full evaluation
"""

from fastapi import APIRouter

from backend.api.calculator import router as calculator_router

# Create main API router
api_router = APIRouter()

api_router.include_router(calculator_router, tags=["calculator"])  # Has its own /calculator prefix

__all__ = [
    "api_router",
    "calculator_router",
]
