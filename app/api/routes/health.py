from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model"""
    status: str
    service: str
    version: str
    environment: str
    ai_delegation: bool


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring and diagnostics.

    Returns:
        HealthResponse: Service status and configuration info
    """
    return HealthResponse(
        status="ok",
        service="Course Guide Assistant",
        version="1.0.0",
        environment=settings.app_env,
        ai_delegation=settings.enable_ai_delegation,
    )
