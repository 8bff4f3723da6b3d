"""
Filter system for the loan pipeline client.

This module provides the leaf filter variants, the composite AND/OR node and
the combination algebra that builds filter trees.
"""

from .models import (
    EMPTY_VALUE_SENTINEL,
    format_date,
    BaseFilter,
    StringFilter,
    DateFilter,
    EmptyValueFilter,
    NotEmptyValueFilter,
    MultiValueFilter,
    CompositeFilter,
    Filter,
    all_of,
    any_of,
)

__all__ = [
    "EMPTY_VALUE_SENTINEL",
    "format_date",
    "BaseFilter",
    "StringFilter",
    "DateFilter",
    "EmptyValueFilter",
    "NotEmptyValueFilter",
    "MultiValueFilter",
    "CompositeFilter",
    "Filter",
    "all_of",
    "any_of",
]
