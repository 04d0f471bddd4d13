"""
Unit tests for employee aggregations.
"""

import pytest

from service_employee.app.domain.aggregations import (
    highest_salary,
    search_by_name,
    top_earner_names,
)
from service_employee.app.models import Employee


def make_employee(employee_id: str, name: str, salary: int) -> Employee:
    return Employee(id=employee_id, name=name, salary=salary, age=30, title="Engineer")


@pytest.fixture
def employees():
    """The four-employee roster used throughout."""
    return [
        make_employee("1", "John Doe", 100000),
        make_employee("2", "Jane Smith", 120000),
        make_employee("3", "Alice Johnson", 90000),
        make_employee("4", "Bob Brown", 110000),
    ]


class TestSearchByName:
    """Test cases for search_by_name."""

    def test_matches_case_insensitively(self, employees):
        result = search_by_name(employees, "JANE")
        assert [e.name for e in result] == ["Jane Smith"]

    def test_substring_match_keeps_input_order(self, employees):
        result = search_by_name(employees, "jo")
        assert [e.name for e in result] == ["John Doe", "Alice Johnson"]

    def test_empty_term_matches_everyone(self, employees):
        assert search_by_name(employees, "") == employees

    def test_no_match(self, employees):
        assert search_by_name(employees, "zed") == []

    def test_only_returns_matching_names(self, employees):
        for term in ["o", "SM", "n d", "b"]:
            result = search_by_name(employees, term)
            assert all(term.lower() in e.name.lower() for e in result)
            assert len(result) == sum(term.lower() in e.name.lower() for e in employees)


class TestHighestSalary:
    """Test cases for highest_salary."""

    def test_returns_maximum(self, employees):
        assert highest_salary(employees) == 120000

    def test_empty_collection_is_zero(self):
        assert highest_salary([]) == 0

    def test_single_employee(self):
        assert highest_salary([make_employee("1", "Solo", 5)]) == 5


class TestTopEarnerNames:
    """Test cases for top_earner_names."""

    def test_sorted_by_salary_descending(self, employees):
        assert top_earner_names(employees) == ["Jane Smith", "Bob Brown", "John Doe", "Alice Johnson"]

    def test_limits_result(self, employees):
        assert top_earner_names(employees, 2) == ["Jane Smith", "Bob Brown"]

    def test_never_pads(self):
        assert top_earner_names([make_employee("1", "Only", 10)], 10) == ["Only"]
        assert top_earner_names([]) == []

    def test_equal_salaries_keep_input_order(self):
        roster = [
            make_employee("1", "First", 50),
            make_employee("2", "Rich", 90),
            make_employee("3", "Second", 50),
            make_employee("4", "Third", 50),
        ]
        assert top_earner_names(roster) == ["Rich", "First", "Second", "Third"]

    def test_default_limit_is_ten(self):
        roster = [make_employee(str(i), f"Employee {i}", 1000 + i) for i in range(15)]
        result = top_earner_names(roster)
        assert len(result) == 10
        assert result[0] == "Employee 14"
        assert result[-1] == "Employee 5"
