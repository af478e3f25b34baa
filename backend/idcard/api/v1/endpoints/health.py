from __future__ import annotations

from fastapi import APIRouter

from idcard.core.config import settings
from idcard.services.sheets_service import sheets_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    try:
        if sheets_service.initialized:
            ok = await sheets_service.check_connection()
            services["google_sheets"] = "ok" if ok else "error"
        else:
            services["google_sheets"] = "not_configured"
    except Exception:
        services["google_sheets"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
