"""Bearer tokens for logged-in users (HS256 JWT)."""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import HTTPException, status
from jose import jwt
from jose.constants import Algorithms
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from employee_hub.models.auth import UserInfo

logger = logging.getLogger(__name__)

_ISSUER = "employee-hub"


def create_access_token(user: UserInfo, secret_key: str, ttl_minutes: int) -> str:
    now = int(time.time())
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "name": user.name,
        "iss": _ISSUER,
        "iat": now,
        "exp": now + ttl_minutes * 60,
    }
    return jwt.encode(claims, secret_key, algorithm=Algorithms.HS256)


def validate_token(token: str, secret_key: str) -> dict[str, Any]:
    if not secret_key:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Missing token signing configuration",
        )

    try:
        return jwt.decode(
            token,
            secret_key,
            algorithms=[Algorithms.HS256],
            issuer=_ISSUER,
            options={"require_exp": True, "require_sub": True},
        )
    except ExpiredSignatureError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is expired",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    except (JWTClaimsError, JWTError) as e:
        logger.debug("Rejected token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def user_from_claims(payload: dict[str, Any]) -> UserInfo:
    return UserInfo(
        id=int(payload["sub"]),
        email=payload.get("email", ""),
        name=payload.get("name", ""),
    )
