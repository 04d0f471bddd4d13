"""
Read-only aggregations over a fetched employee collection.
"""

from typing import List, Sequence

from service_employee.app.models import Employee

TOP_EARNERS_LIMIT = 10


def search_by_name(employees: Sequence[Employee], term: str) -> List[Employee]:
    """Employees whose name contains ``term``, case-insensitively, in input order.

    An empty term matches everyone.
    """
    needle = term.casefold()
    return [employee for employee in employees if needle in employee.name.casefold()]


def highest_salary(employees: Sequence[Employee]) -> int:
    """Maximum salary, or 0 for an empty collection."""
    return max((employee.salary for employee in employees), default=0)


def top_earner_names(employees: Sequence[Employee], limit: int = TOP_EARNERS_LIMIT) -> List[str]:
    """Names of the ``limit`` best paid employees, highest salary first.

    ``sorted`` is stable, so employees with equal salaries keep their input
    order. Fewer than ``limit`` names come back when there are fewer employees.
    """
    ranked = sorted(employees, key=lambda employee: employee.salary, reverse=True)
    return [employee.name for employee in ranked[:max(limit, 0)]]
