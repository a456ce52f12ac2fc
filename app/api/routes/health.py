"""
Verificação de estado do servidor
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import settings

router = APIRouter()


@router.get("/")
async def health_check() -> dict:
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "lumi",
        "version": "0.1.0",
        "environment": settings.environment,
        "llm_configured": bool(settings.openai_api_key),
        "store_configured": settings.store_configured,
    }
