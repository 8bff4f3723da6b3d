from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..enums import SortOrder
from ..filters import Filter


@dataclass(frozen=True)
class SortCriterion:
    canonical_name: str
    order: SortOrder = SortOrder.ASCENDING


@dataclass(frozen=True)
class LoanPipelineRequest:
    """
    Immutable request envelope: one optional filter tree plus field selection,
    sort, pagination and the archive flag.

    Every with_* call returns a new envelope; the filter tree is shared by
    reference. Empty `fields`/`sort` are left off the wire entirely.
    """
    filter: Optional[Filter] = None
    fields: Tuple[str, ...] = ()
    sort: Tuple[SortCriterion, ...] = ()
    start: Optional[int] = None
    limit: Optional[int] = None
    include_archived_loans: bool = False

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields or ()))
        object.__setattr__(self, "sort", tuple(self.sort or ()))

    def with_filter(self, filter: Optional[Filter]) -> "LoanPipelineRequest":
        return replace(self, filter=filter)

    def with_fields(self, *names: str) -> "LoanPipelineRequest":
        if not names:
            return self
        return replace(self, fields=self.fields + tuple(names))

    def with_sort(self, *criteria: SortCriterion) -> "LoanPipelineRequest":
        if not criteria:
            return self
        return replace(self, sort=self.sort + tuple(criteria))

    def with_pagination(self, start: Optional[int], limit: Optional[int]) -> "LoanPipelineRequest":
        return replace(self, start=start, limit=limit)

    def include_archived(self, flag: bool = True) -> "LoanPipelineRequest":
        return replace(self, include_archived_loans=flag)

    def to_dict(self) -> dict:
        from ..serializer import request_to_dict

        return request_to_dict(self)

    def to_json(self, indented: bool = False) -> str:
        from ..serializer import serialize

        return serialize(self, indented=indented)
