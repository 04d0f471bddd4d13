"""
Adapters package for the Employee Service.

Contains the HTTP client for the upstream employee-record service. The
adapter encapsulates:

- Base URL and request shapes
- The retry policy
- Error handling that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .employee_client import EmployeeClient

__all__ = [
    "EmployeeClient",
]
