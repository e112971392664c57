"""Health check and service info endpoints"""
from fastapi import APIRouter
from generative_ui.config import settings
from generative_ui.services.llm_provider import SUPPORTED_MODELS

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "UP", "service": settings.SERVICE_NAME}


@router.get("/info")
async def info():
    """Service info endpoint"""
    from generative_ui import __version__
    return {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "description": "Generative UI Service - design analysis + UI tree generation",
        "models": {
            "design": settings.DESIGN_MODEL,
            "ui": settings.UI_MODEL,
            "supported": {provider.value: models for provider, models in SUPPORTED_MODELS.items()}
        }
    }
