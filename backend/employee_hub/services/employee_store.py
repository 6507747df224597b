"""Cached employee list with de-duplicated fetches and invalidate-on-success mutations.

The store never patches its cached list from mutation responses. A successful
create/update/delete only marks the list stale; the next read refetches the
whole collection from the remote endpoint.
"""

from __future__ import annotations

import asyncio
import logging

from employee_hub.core.exceptions import EmployeeApiError, MutationFailed, MutationOperation
from employee_hub.models.employee import Employee, EmployeeFormData
from employee_hub.services.employee_client import EmployeeClient

logger = logging.getLogger(__name__)


class EmployeeStore:
    def __init__(self, client: EmployeeClient) -> None:
        self.client = client
        self._employees: tuple[Employee, ...] = ()
        self._stale = True
        self._generation = 0
        self._inflight: asyncio.Task[tuple[Employee, ...]] | None = None

    @property
    def is_stale(self) -> bool:
        return self._stale

    async def get_employees(self) -> tuple[Employee, ...]:
        if not self._stale:
            return self._employees

        task = self._inflight
        if task is None:
            task = asyncio.create_task(self._fetch(self._generation))
            task.add_done_callback(self._clear_inflight)
            self._inflight = task

        # One caller being cancelled must not cancel the fetch shared with the others.
        return await asyncio.shield(task)

    async def add_employee(self, data: EmployeeFormData) -> Employee:
        try:
            created = await self.client.create(data)
        except EmployeeApiError as e:
            logger.warning("Failed to create employee: %s", e)
            raise MutationFailed(MutationOperation.CREATE, e) from e

        self._invalidate()
        logger.info("Employee %s created", created.id)
        return created

    async def update_employee(self, employee_id: int, data: EmployeeFormData) -> Employee:
        try:
            updated = await self.client.replace(employee_id, data)
        except EmployeeApiError as e:
            logger.warning("Failed to update employee %s: %s", employee_id, e)
            raise MutationFailed(MutationOperation.UPDATE, e) from e

        self._invalidate()
        logger.info("Employee %s updated", employee_id)
        return updated

    async def remove_employee(self, employee_id: int) -> None:
        try:
            await self.client.delete(employee_id)
        except EmployeeApiError as e:
            logger.warning("Failed to delete employee %s: %s", employee_id, e)
            raise MutationFailed(MutationOperation.DELETE, e) from e

        self._invalidate()
        logger.info("Employee %s deleted", employee_id)

    async def toggle_active(self, employee: Employee) -> Employee:
        data = employee.to_form_data(is_active=not employee.is_active)
        return await self.update_employee(employee.id, data)

    async def _fetch(self, generation: int) -> tuple[Employee, ...]:
        employees = tuple(await self.client.list_all())
        if generation == self._generation:
            self._employees = employees
            self._stale = False
        else:
            logger.debug("Discarding employee list fetched before invalidation")
        return employees

    def _clear_inflight(self, task: asyncio.Task[tuple[Employee, ...]]) -> None:
        if self._inflight is task:
            self._inflight = None
        if not task.cancelled() and task.exception() is not None:
            logger.warning("Employee list fetch failed: %s", task.exception())

    def _invalidate(self) -> None:
        self._generation += 1
        self._stale = True
        self._inflight = None
