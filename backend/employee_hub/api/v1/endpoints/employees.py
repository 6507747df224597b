from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import HTMLResponse

from employee_hub.core.dependencies import get_current_user, get_employee_client, get_employee_store
from employee_hub.core.exceptions import (
    EmployeeApiUnavailable,
    MutationFailed,
    MutationOperation,
    NotFoundError,
    TransportError,
)
from employee_hub.models.auth import UserInfo
from employee_hub.models.employee import (
    Employee,
    EmployeeFilters,
    EmployeeFormData,
    GenderFilter,
    StatusFilter,
)
from employee_hub.services.employee_client import EmployeeClient
from employee_hub.services.employee_filters import apply_filters
from employee_hub.services.employee_store import EmployeeStore
from employee_hub.services.print_renderer import render_employee_list, render_employee_sheet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

_FAILURE_DETAILS = {
    MutationOperation.CREATE: "Failed to add employee",
    MutationOperation.UPDATE: "Failed to update employee",
    MutationOperation.DELETE: "Failed to delete employee",
}


def get_filters(
    search: str = "",
    gender: GenderFilter = "All",
    status_filter: StatusFilter = Query("All", alias="status"),
) -> EmployeeFilters:
    return EmployeeFilters(search=search, gender=gender, status=status_filter)


def _not_found(employee_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee with id {employee_id} not found",
    )


def _unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Employee records service is not configured",
    )


def _mutation_error(err: MutationFailed, employee_id: int | None = None) -> HTTPException:
    if isinstance(err.cause, NotFoundError):
        return _not_found(err.cause.employee_id if employee_id is None else employee_id)
    if isinstance(err.cause, EmployeeApiUnavailable):
        return _unavailable()

    logger.error("Employee %s rejected by remote collection: %s", err.operation.value, err.cause)
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=_FAILURE_DETAILS[err.operation],
    )


async def _load_employees(store: EmployeeStore) -> tuple[Employee, ...]:
    try:
        return await store.get_employees()
    except EmployeeApiUnavailable as err:
        raise _unavailable() from err
    except TransportError as err:
        logger.exception("Failed to load employees")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load employees",
        ) from err


async def _find_cached(store: EmployeeStore, employee_id: int) -> Employee:
    for employee in await _load_employees(store):
        if employee.id == employee_id:
            return employee
    raise _not_found(employee_id)


@router.get("", response_model=list[Employee])
async def list_employees(
    filters: EmployeeFilters = Depends(get_filters),  # noqa: B008
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    return apply_filters(await _load_employees(store), filters)


@router.get("/print", response_class=HTMLResponse)
async def print_employee_list(
    filters: EmployeeFilters = Depends(get_filters),  # noqa: B008
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    employees = apply_filters(await _load_employees(store), filters)
    return HTMLResponse(render_employee_list(employees))


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    client: EmployeeClient = Depends(get_employee_client),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    try:
        return await client.get_by_id(employee_id)
    except NotFoundError as err:
        raise _not_found(employee_id) from err
    except EmployeeApiUnavailable as err:
        raise _unavailable() from err
    except TransportError as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to retrieve employee",
        ) from err


@router.get("/{employee_id}/print", response_class=HTMLResponse)
async def print_employee(
    employee_id: int,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    employee = await _find_cached(store, employee_id)
    return HTMLResponse(render_employee_sheet(employee))


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeFormData,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    try:
        return await store.add_employee(data)
    except MutationFailed as err:
        raise _mutation_error(err) from err


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: int,
    data: EmployeeFormData,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    try:
        return await store.update_employee(employee_id, data)
    except MutationFailed as err:
        raise _mutation_error(err, employee_id) from err


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    try:
        await store.remove_employee(employee_id)
    except MutationFailed as err:
        raise _mutation_error(err, employee_id) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{employee_id}/toggle-status", response_model=Employee)
async def toggle_employee_status(
    employee_id: int,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    employee = await _find_cached(store, employee_id)
    try:
        return await store.toggle_active(employee)
    except MutationFailed as err:
        raise _mutation_error(err, employee_id) from err
