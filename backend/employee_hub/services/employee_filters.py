from __future__ import annotations

from collections.abc import Iterable

from employee_hub.models.employee import Employee, EmployeeFilters


def matches_filters(employee: Employee, filters: EmployeeFilters) -> bool:
    search = filters.search.casefold()
    if search and search not in employee.full_name.casefold():
        return False

    if filters.gender != "All" and employee.gender != filters.gender:
        return False

    if filters.status == "Active":
        return employee.is_active
    if filters.status == "Inactive":
        return not employee.is_active
    return True


def apply_filters(employees: Iterable[Employee], filters: EmployeeFilters) -> list[Employee]:
    """Return the employees passing every filter axis, in their original order."""
    return [employee for employee in employees if matches_filters(employee, filters)]
