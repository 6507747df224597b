"""Dashboard aggregates: status and gender counts, top states and ratios."""

from __future__ import annotations

import math
from collections.abc import Sequence

from employee_hub.core.constants import GENDERS, TOP_STATES_LIMIT
from employee_hub.models.employee import Employee, EmployeeStats, StateCount


def percentage(part: int, total: int) -> float:
    if total == 0:
        return 0.0
    return part / total * 100


def rounded_percentage(part: int, total: int) -> int:
    # Half-up, so 12.5 -> 13 rather than banker's rounding.
    return math.floor(percentage(part, total) + 0.5)


def rank_states(employees: Sequence[Employee], limit: int = TOP_STATES_LIMIT) -> list[StateCount]:
    counts: dict[str, int] = {}
    for employee in employees:
        counts[employee.state] = counts.get(employee.state, 0) + 1

    # sorted() is stable, so equal counts keep first-encountered order.
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [StateCount(state=state, count=count) for state, count in ranked[:limit]]


def compute_stats(employees: Sequence[Employee]) -> EmployeeStats:
    total = len(employees)
    active = sum(1 for employee in employees if employee.is_active)

    by_gender = {gender: 0 for gender in GENDERS}
    for employee in employees:
        by_gender[employee.gender] = by_gender.get(employee.gender, 0) + 1

    return EmployeeStats(
        total=total,
        active=active,
        inactive=total - active,
        by_gender=by_gender,
        top_states=rank_states(employees),
        distinct_states=len({employee.state for employee in employees}),
        active_rate=rounded_percentage(active, total),
        gender_rates={gender: rounded_percentage(count, total) for gender, count in by_gender.items()},
    )
