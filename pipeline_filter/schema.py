from __future__ import annotations
import json
import logging
from typing import Any, Dict, Union

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .enums import DatePrecision, LogicalOperator, MatchType, SortOrder, tokens_of
from .errors import WireFormatError

log = logging.getLogger("pipeline_filter.schema")

# ---------------------------------------------------------------------------
# JSON Schemas for the wire format
# ---------------------------------------------------------------------------

_DEFS: Dict[str, Any] = {
    "LeafFilter": {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "matchType": {"type": "string", "enum": tokens_of(MatchType)},
            "canonicalName": {"type": "string", "minLength": 1},
            "value": {
                "oneOf": [
                    {"type": "string"},
                    {"type": "array", "items": {"type": "string"}},
                ]
            },
            "include": {"type": "boolean"},
            "precision": {"type": "string", "enum": tokens_of(DatePrecision)},
        },
        # value shape is not tied to matchType; leaves never cross-check the two
        "required": ["matchType", "canonicalName", "value"],
    },
    "CompositeFilter": {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "operator": {"type": "string", "enum": tokens_of(LogicalOperator)},
            "terms": {"type": "array", "items": {"$ref": "#/$defs/Filter"}},
        },
        "required": ["operator", "terms"],
    },
    "Filter": {
        "oneOf": [
            {"$ref": "#/$defs/LeafFilter"},
            {"$ref": "#/$defs/CompositeFilter"},
        ]
    },
    "SortCriterion": {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "canonicalName": {"type": "string", "minLength": 1},
            "order": {"type": "string", "enum": tokens_of(SortOrder)},
        },
        "required": ["canonicalName", "order"],
    },
}

FILTER_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Loan Pipeline Filter",
    "$defs": _DEFS,
    "$ref": "#/$defs/Filter",
}

REQUEST_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Loan Pipeline Request",
    "$defs": _DEFS,
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "filter": {"$ref": "#/$defs/Filter"},
        "fields": {"type": "array", "items": {"type": "string"}, "minItems": 1},
        "sort": {"type": "array", "items": {"$ref": "#/$defs/SortCriterion"}, "minItems": 1},
        "start": {"type": "integer"},
        "limit": {"type": "integer"},
        "includeArchivedLoans": {"type": "boolean"},
    },
    "required": ["includeArchivedLoans"],
}

_FILTER_VALIDATOR = Draft202012Validator(FILTER_SCHEMA)
_REQUEST_VALIDATOR = Draft202012Validator(REQUEST_SCHEMA)


def _load(payload: Union[str, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(payload, str):
        try:
            return json.loads(payload)
        except json.JSONDecodeError as e:
            raise WireFormatError(f"Payload is not valid JSON: {e}") from e
    return payload


def _check(validator: Draft202012Validator, instance: Any, what: str) -> None:
    error = best_match(validator.iter_errors(instance))
    if error is None:
        return
    path = "/".join(str(p) for p in error.absolute_path) or "<root>"
    log.warning("%s failed wire schema validation at %s: %s", what, path, error.message)
    raise WireFormatError(f"Invalid {what} at {path}: {error.message}")


def validate_filter_json(payload: Union[str, Dict[str, Any]]) -> None:
    """
    Check a rendered filter (JSON text or dict) against FILTER_SCHEMA.
    Raises WireFormatError on the first (most relevant) violation.
    """
    _check(_FILTER_VALIDATOR, _load(payload), "filter")


def validate_request_json(payload: Union[str, Dict[str, Any]]) -> None:
    """
    Check a rendered request envelope (JSON text or dict) against REQUEST_SCHEMA.
    Raises WireFormatError on the first (most relevant) violation.
    """
    _check(_REQUEST_VALIDATOR, _load(payload), "request")


__all__ = [
    "FILTER_SCHEMA",
    "REQUEST_SCHEMA",
    "validate_filter_json",
    "validate_request_json",
]
