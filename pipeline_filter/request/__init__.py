"""
Request envelope for the loan pipeline client.

This module binds a filter tree to field selection, sort, pagination and the
archive flag.
"""

from .models import (
    SortCriterion,
    LoanPipelineRequest,
)

__all__ = [
    "SortCriterion",
    "LoanPipelineRequest",
]
