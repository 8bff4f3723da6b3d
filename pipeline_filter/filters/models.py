from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date as _date
from typing import Iterable, Optional, Tuple, Union

from ..enums import DatePrecision, LogicalOperator, MatchType
from ..errors import InvalidCombination

# Fixed value carried by the empty / not-empty filters.
EMPTY_VALUE_SENTINEL = "0001-01-01T00:00:00"


# ---------------------------------------------------------------------------
# Date formatting
# ---------------------------------------------------------------------------

def format_date(value: _date, precision: DatePrecision = DatePrecision.DAY) -> str:
    """
    Render a date (or datetime) at the given precision:
      DAY   -> yyyy-MM-dd
      MONTH -> yyyy-MM
      YEAR  -> yyyy
    Any other precision (RECURRING, HOUR, MINUTE) falls back to the DAY format.
    """
    if precision == DatePrecision.YEAR:
        return f"{value.year:04d}"
    if precision == DatePrecision.MONTH:
        return f"{value.year:04d}-{value.month:02d}"
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


# ---------------------------------------------------------------------------
# Combination algebra
# ---------------------------------------------------------------------------

class _Combinable:
    # operator sugar over the and_/or_ each node type defines
    def __and__(self, other: Filter) -> CompositeFilter:
        return self.and_(other)

    def __or__(self, other: Filter) -> CompositeFilter:
        return self.or_(other)


@dataclass(frozen=True)
class BaseFilter(_Combinable):
    """
    A leaf filter: one atomic comparison against a canonical field name.
    Combining a leaf always builds a fresh two-term composite.
    """
    canonical_name: str
    match_type: MatchType

    def __post_init__(self):
        if type(self) is BaseFilter:
            raise TypeError("BaseFilter is abstract; construct one of the leaf filter types")

    def _combine(self, op: LogicalOperator, other: Optional[Filter]) -> CompositeFilter:
        if other is None:
            raise InvalidCombination(
                f"Cannot combine {type(self).__name__}({self.canonical_name!r}) "
                f"with {op.value.upper()} and no operand"
            )
        return CompositeFilter(op, (self, other))

    def and_(self, other: Filter) -> CompositeFilter:
        return self._combine(LogicalOperator.AND, other)

    def or_(self, other: Filter) -> CompositeFilter:
        return self._combine(LogicalOperator.OR, other)


# ---------------------------------------------------------------------------
# Leaf variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StringFilter(BaseFilter):
    value: str
    include: Optional[bool] = None


@dataclass(frozen=True)
class DateFilter(BaseFilter):
    value: str
    precision: DatePrecision = DatePrecision.DAY

    @classmethod
    def from_date(
        cls,
        canonical_name: str,
        match_type: MatchType,
        value: _date,
        precision: DatePrecision = DatePrecision.DAY,
    ) -> "DateFilter":
        return cls(canonical_name, match_type, format_date(value, precision), precision)


@dataclass(frozen=True)
class EmptyValueFilter(BaseFilter):
    match_type: MatchType = field(default=MatchType.IS_EMPTY, init=False)
    value: str = field(default=EMPTY_VALUE_SENTINEL, init=False)


@dataclass(frozen=True)
class NotEmptyValueFilter(BaseFilter):
    match_type: MatchType = field(default=MatchType.IS_NOT_EMPTY, init=False)
    value: str = field(default=EMPTY_VALUE_SENTINEL, init=False)


@dataclass(frozen=True)
class MultiValueFilter(BaseFilter):
    match_type: MatchType = field(default=MatchType.MULTI_VALUE, init=False)
    value: Tuple[str, ...] = ()
    include: bool = True

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "value", tuple(self.value or ()))


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CompositeFilter(_Combinable):
    """
    Sibling terms under one logical operator. Terms keep insertion order.

    Same-operator combination appends to the existing terms (flattening);
    a different operator wraps this node as a single term (nesting), so
    `a.and_(b).or_(c)` is `OR[AND[a, b], c]`.
    """
    operator: LogicalOperator
    terms: Tuple[Filter, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "terms", tuple(self.terms or ()))

    @classmethod
    def of(cls, operator: LogicalOperator, *terms: Filter) -> "CompositeFilter":
        return cls(operator, terms)

    def _combine(self, op: LogicalOperator, other: Optional[Filter]) -> CompositeFilter:
        if other is None:
            return self
        if self.operator == op:
            return replace(self, terms=self.terms + (other,))
        return CompositeFilter(op, (self, other))

    def and_(self, other: Optional[Filter]) -> CompositeFilter:
        return self._combine(LogicalOperator.AND, other)

    def or_(self, other: Optional[Filter]) -> CompositeFilter:
        return self._combine(LogicalOperator.OR, other)


Filter = Union[
    StringFilter,
    DateFilter,
    EmptyValueFilter,
    NotEmptyValueFilter,
    MultiValueFilter,
    CompositeFilter,
]


def all_of(filters: Iterable[Filter]) -> Optional[Filter]:
    """AND together any number of filters; None for an empty input."""
    return _fold(LogicalOperator.AND, filters)


def any_of(filters: Iterable[Filter]) -> Optional[Filter]:
    """OR together any number of filters; None for an empty input."""
    return _fold(LogicalOperator.OR, filters)


def _fold(op: LogicalOperator, filters: Iterable[Filter]) -> Optional[Filter]:
    result: Optional[Filter] = None
    for f in filters:
        if result is None:
            result = f
        elif op == LogicalOperator.AND:
            result = result.and_(f)
        else:
            result = result.or_(f)
    return result


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
