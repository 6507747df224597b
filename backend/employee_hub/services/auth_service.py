"""Mocked login against a fixed user table, with simulated latency."""

from __future__ import annotations

import asyncio
import hmac
import logging

from employee_hub.core.config import Settings
from employee_hub.core.exceptions import InvalidCredentials
from employee_hub.models.auth import LoginCredentials, UserInfo

logger = logging.getLogger(__name__)

MOCK_USERS: list[dict[str, object]] = [
    {"id": 1, "email": "admin@company.com", "password": "password123", "name": "Admin User"},
    {"id": 2, "email": "hr@company.com", "password": "password123", "name": "HR Manager"},
]


class AuthService:
    def __init__(self, latency_seconds: float = 0.0) -> None:
        self.latency_seconds = latency_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> AuthService:
        return cls(latency_seconds=settings.AUTH_LATENCY_SECONDS)

    async def login(self, credentials: LoginCredentials) -> UserInfo:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        email = credentials.email.strip().lower()
        for user in MOCK_USERS:
            if user["email"] == email and hmac.compare_digest(
                str(user["password"]), credentials.password
            ):
                logger.info("User %s logged in", email)
                return UserInfo(id=user["id"], email=user["email"], name=user["name"])

        logger.warning("Failed login attempt for %s", email)
        raise InvalidCredentials("Invalid email or password")
