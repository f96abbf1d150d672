"""Health check endpoints."""
from fastapi import APIRouter
import logging

from ..core.config import settings
from ..core.database import health_check_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])

@router.get("/")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": "Registrar API",
        "version": settings.app_version,
    }

@router.get("/db-health")
async def database_health():
    """Database health check"""
    if await health_check_db():
        return {"status": "healthy", "database": "reachable"}
    logger.error("Database health check reported unreachable store")
    return {"status": "unhealthy", "database": "unreachable"}
