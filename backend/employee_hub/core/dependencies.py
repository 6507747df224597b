from __future__ import annotations

import logging

from fastapi import Header, HTTPException, Request, status

from employee_hub.core.auth import user_from_claims, validate_token
from employee_hub.core.config import settings
from employee_hub.models.auth import UserInfo
from employee_hub.services.auth_service import AuthService
from employee_hub.services.employee_client import EmployeeClient
from employee_hub.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


async def get_current_user(authorization: str | None = Header(None)) -> UserInfo:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization.split(" ", 1)[1]
    payload = validate_token(token, settings.AUTH_SECRET_KEY)

    try:
        return user_from_claims(payload)
    except (KeyError, ValueError) as e:
        logger.error("Token carried unusable claims: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def get_employee_store(request: Request) -> EmployeeStore:
    return request.app.state.employee_store


def get_employee_client(request: Request) -> EmployeeClient:
    return request.app.state.employee_client


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service
