from __future__ import annotations
import json
import logging
from enum import Enum
from typing import Any, Dict, Tuple

from .config import get_settings
from .enums import encode_token
from .filters import (
    CompositeFilter,
    DateFilter,
    EmptyValueFilter,
    Filter,
    MultiValueFilter,
    NotEmptyValueFilter,
    StringFilter,
)
from .request import LoanPipelineRequest, SortCriterion

log = logging.getLogger("pipeline_filter.serializer")

# (attribute, wire name) pairs emitted after matchType/canonicalName, in order.
_LEAF_FIELDS: Dict[type, Tuple[Tuple[str, str], ...]] = {
    StringFilter: (("value", "value"), ("include", "include")),
    DateFilter: (("value", "value"), ("precision", "precision")),
    EmptyValueFilter: (("value", "value"),),
    NotEmptyValueFilter: (("value", "value"),),
    MultiValueFilter: (("value", "value"), ("include", "include")),
}


def _wire_value(v: Any) -> Any:
    if isinstance(v, Enum):
        return encode_token(v)
    if isinstance(v, tuple):
        return [_wire_value(x) for x in v]
    return v


def filter_to_dict(node: Filter) -> Dict[str, Any]:
    """
    Render one filter node (recursively for composites) as a wire dict.
    Leaf keys: matchType, canonicalName, value, then include/precision.
    Absent optional values are omitted, never emitted as null.
    """
    if isinstance(node, CompositeFilter):
        return {
            "operator": encode_token(node.operator),
            "terms": [filter_to_dict(t) for t in node.terms],
        }

    fields = _LEAF_FIELDS.get(type(node))
    if fields is None:
        raise TypeError(f"Unsupported filter type: {type(node).__name__}")

    out: Dict[str, Any] = {
        "matchType": encode_token(node.match_type),
        "canonicalName": node.canonical_name,
    }
    for attr, wire_name in fields:
        value = getattr(node, attr)
        if value is None:
            continue
        out[wire_name] = _wire_value(value)
    return out


def sort_to_dict(criterion: SortCriterion) -> Dict[str, Any]:
    return {
        "canonicalName": criterion.canonical_name,
        "order": encode_token(criterion.order),
    }


def request_to_dict(request: LoanPipelineRequest) -> Dict[str, Any]:
    """
    Fixed key order: filter, fields, sort, start, limit, includeArchivedLoans.
    Only includeArchivedLoans is always present.
    """
    out: Dict[str, Any] = {}
    if request.filter is not None:
        out["filter"] = filter_to_dict(request.filter)
    if request.fields:
        out["fields"] = list(request.fields)
    if request.sort:
        out["sort"] = [sort_to_dict(s) for s in request.sort]
    if request.start is not None:
        out["start"] = request.start
    if request.limit is not None:
        out["limit"] = request.limit
    out["includeArchivedLoans"] = bool(request.include_archived_loans)
    return out


def _dumps(data: Dict[str, Any], indented: bool) -> str:
    if indented:
        return json.dumps(data, indent=get_settings().json_indent, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def serialize(request: LoanPipelineRequest, indented: bool = False) -> str:
    """
    Render a request envelope as canonical JSON. Indentation is formatting only.
    """
    data = request_to_dict(request)
    if get_settings().validate_output:
        from .schema import validate_request_json

        validate_request_json(data)
    text = _dumps(data, indented)
    log.debug("Serialized loan pipeline request (%d chars, keys=%s)", len(text), list(data))
    return text


def serialize_filter(node: Filter, indented: bool = False) -> str:
    """Render a bare filter tree, without the request envelope."""
    return _dumps(filter_to_dict(node), indented)


__all__ = [
    "filter_to_dict",
    "sort_to_dict",
    "request_to_dict",
    "serialize",
    "serialize_filter",
]
