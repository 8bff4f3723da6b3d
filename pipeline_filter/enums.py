from __future__ import annotations
from enum import Enum
from typing import Type, TypeVar

from .errors import UnknownEnumToken

E = TypeVar("E", bound=Enum)

# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------

def encode_token(member: Enum) -> str:
    """
    Wire token for an enum member: the whole symbolic name, lowercased.
    'GreaterThanOrEquals' -> 'greaterthanorequals' (no word separators).
    """
    return str(member.value).lower()


def decode_token(enum_cls: Type[E], token: str) -> E:
    """
    Case-insensitive lookup of a token against the symbolic names of `enum_cls`.
    """
    if not isinstance(token, str):
        raise UnknownEnumToken(enum_cls.__name__, token)
    folded = token.lower()
    for member in enum_cls:
        if str(member.value).lower() == folded:
            return member
    raise UnknownEnumToken(enum_cls.__name__, token)


class _WireEnum(str, Enum):
    @property
    def token(self) -> str:
        return encode_token(self)

    @classmethod
    def from_token(cls, token: str):
        return decode_token(cls, token)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class MatchType(_WireEnum):
    EQUALS = "Equals"
    NOT_EQUALS = "NotEquals"
    CONTAINS = "Contains"
    STARTS_WITH = "StartsWith"
    EXACT = "Exact"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUALS = "GreaterThanOrEquals"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUALS = "LessThanOrEquals"
    IS_EMPTY = "IsEmpty"
    IS_NOT_EMPTY = "IsNotEmpty"
    MULTI_VALUE = "MultiValue"


class LogicalOperator(_WireEnum):
    AND = "And"
    OR = "Or"


class DatePrecision(_WireEnum):
    DAY = "Day"
    MONTH = "Month"
    YEAR = "Year"
    RECURRING = "Recurring"
    HOUR = "Hour"
    MINUTE = "Minute"


class SortOrder(_WireEnum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"


def tokens_of(enum_cls: Type[Enum]) -> list[str]:
    """All wire tokens of an enum, in declaration order."""
    return [encode_token(m) for m in enum_cls]


__all__ = [
    "MatchType",
    "LogicalOperator",
    "DatePrecision",
    "SortOrder",
    "encode_token",
    "decode_token",
    "tokens_of",
]
