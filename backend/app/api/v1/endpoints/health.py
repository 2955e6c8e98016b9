from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings
from app.services.directory_session import directory_session
from app.services.employee_store import employee_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {
        "record_store": "ok" if employee_store.initialized else "not_initialized",
        "session": "active" if directory_session.is_authenticated else "none",
    }

    return {
        "status": "healthy" if employee_store.initialized else "degraded",
        "version": settings.APP_VERSION,
        "records": employee_store.count(),
        "services": services,
    }


@router.get("/ready")
async def readiness_check():
    return {"ready": True}
