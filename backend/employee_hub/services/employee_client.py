"""REST client for the remote employee collection (json-server style)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from employee_hub.core.config import Settings
from employee_hub.core.exceptions import EmployeeApiUnavailable, NotFoundError, TransportError
from employee_hub.models.employee import Employee, EmployeeFormData

logger = logging.getLogger(__name__)


class EmployeeClient:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = 0.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEES_API_URL:
            logger.warning("EMPLOYEES_API_URL missing — EmployeeClient not initialized")
            return

        resource = settings.EMPLOYEES_RESOURCE.strip("/")
        self.base_url = f"{settings.EMPLOYEES_API_URL.rstrip('/')}/{resource}"
        self.timeout_seconds = settings.REQUEST_TIMEOUT_SECONDS
        self.initialized = True
        logger.info("EmployeeClient initialized (url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = 0.0

    async def list_all(self) -> list[Employee]:
        data = await self._request("GET", self.base_url)
        if not isinstance(data, list):
            raise TransportError("Expected a JSON array of employees", status=200, body=str(data))
        return [self._parse(item) for item in data]

    async def get_by_id(self, employee_id: int) -> Employee:
        data = await self._request("GET", self._item_url(employee_id), employee_id=employee_id)
        return self._parse(data)

    async def create(self, data: EmployeeFormData) -> Employee:
        created = await self._request("POST", self.base_url, payload=data.to_payload())
        return self._parse(created)

    async def replace(self, employee_id: int, data: EmployeeFormData) -> Employee:
        replaced = await self._request(
            "PUT",
            self._item_url(employee_id),
            payload=data.to_payload(),
            employee_id=employee_id,
        )
        return self._parse(replaced)

    async def delete(self, employee_id: int) -> None:
        await self._request("DELETE", self._item_url(employee_id), employee_id=employee_id)

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            timeout = aiohttp.ClientTimeout(total=min(self.timeout_seconds, 5.0))
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request("GET", self.base_url) as response:
                    return response.status == 200
        except Exception:
            logger.exception("EmployeeClient connection check failed")
            return False

    def _item_url(self, employee_id: int) -> str:
        return f"{self.base_url}/{employee_id}"

    async def _request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
        employee_id: int | None = None,
    ) -> Any:
        if not self.initialized:
            raise EmployeeApiUnavailable("EmployeeClient not initialized")

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, json=payload) as response:
                    if response.status == 404 and employee_id is not None:
                        raise NotFoundError(employee_id)

                    if not 200 <= response.status < 300:
                        error_text = await response.text()
                        raise TransportError(
                            f"{method} {url} failed: {response.status} - {error_text}",
                            status=response.status,
                            body=error_text,
                        )

                    if response.status == 204:
                        return None
                    return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {url} timed out after {self.timeout_seconds}s") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"{method} {url} returned invalid JSON") from e

    @staticmethod
    def _parse(data: Any) -> Employee:
        try:
            return Employee.model_validate(data)
        except ValidationError as e:
            raise TransportError("Malformed employee record in response", body=str(data)) from e
