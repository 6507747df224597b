from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from employee_hub.core.auth import create_access_token
from employee_hub.core.config import settings
from employee_hub.core.dependencies import get_auth_service, get_current_user
from employee_hub.core.exceptions import InvalidCredentials
from employee_hub.models.auth import LoginCredentials, LoginResponse, UserInfo
from employee_hub.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginCredentials,
    auth_service: AuthService = Depends(get_auth_service),  # noqa: B008
):
    try:
        user = await auth_service.login(credentials)
    except InvalidCredentials as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(err),
        ) from err

    token = create_access_token(user, settings.AUTH_SECRET_KEY, settings.AUTH_TOKEN_TTL_MINUTES)
    return LoginResponse(access_token=token, user=user)


@router.get("/me", response_model=UserInfo)
async def me(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    return user
