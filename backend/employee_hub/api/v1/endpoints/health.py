from __future__ import annotations

from fastapi import APIRouter, Depends

from employee_hub.core.config import settings
from employee_hub.core.dependencies import get_employee_client
from employee_hub.services.employee_client import EmployeeClient

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(client: EmployeeClient = Depends(get_employee_client)):  # noqa: B008
    services: dict[str, str] = {}

    try:
        if client.initialized:
            ok = await client.check_connection()
            services["employees_api"] = "ok" if ok else "error"
        else:
            services["employees_api"] = "not_configured"
    except Exception:
        services["employees_api"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
