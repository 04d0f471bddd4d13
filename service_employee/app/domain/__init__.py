"""
Domain utilities for the Employee Service.

Pure, stateless aggregations over employees already fetched by the
upstream adapter. Nothing here performs I/O.
"""

from .aggregations import highest_salary, search_by_name, top_earner_names

__all__ = [
    "highest_salary",
    "search_by_name",
    "top_earner_names",
]
