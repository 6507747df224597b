from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from employee_hub.core.dependencies import get_current_user, get_employee_store
from employee_hub.core.exceptions import EmployeeApiUnavailable, TransportError
from employee_hub.models.auth import UserInfo
from employee_hub.models.employee import EmployeeStats
from employee_hub.services.employee_stats import compute_stats
from employee_hub.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=EmployeeStats)
async def dashboard_stats(
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    try:
        employees = await store.get_employees()
    except EmployeeApiUnavailable as err:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee records service is not configured",
        ) from err
    except TransportError as err:
        logger.exception("Failed to load employees for dashboard")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load employees",
        ) from err

    return compute_stats(employees)
