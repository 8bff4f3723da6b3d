"""
Loan pipeline filter client.

Build filter trees from leaf filters, wrap them in a request envelope and
render the envelope in the pipeline API's JSON wire format.
"""

from .enums import (
    MatchType,
    LogicalOperator,
    DatePrecision,
    SortOrder,
    encode_token,
    decode_token,
)
from .errors import (
    PipelineFilterError,
    UnknownEnumToken,
    InvalidCombination,
    WireFormatError,
    ResultDecodeError,
)
from .filters import (
    EMPTY_VALUE_SENTINEL,
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
from .request import SortCriterion, LoanPipelineRequest
from .serializer import filter_to_dict, request_to_dict, serialize, serialize_filter
from .schema import FILTER_SCHEMA, REQUEST_SCHEMA, validate_filter_json, validate_request_json
from .results import LoanResult, parse_loan_results

__all__ = [
    "MatchType",
    "LogicalOperator",
    "DatePrecision",
    "SortOrder",
    "encode_token",
    "decode_token",
    "PipelineFilterError",
    "UnknownEnumToken",
    "InvalidCombination",
    "WireFormatError",
    "ResultDecodeError",
    "EMPTY_VALUE_SENTINEL",
    "StringFilter",
    "DateFilter",
    "EmptyValueFilter",
    "NotEmptyValueFilter",
    "MultiValueFilter",
    "CompositeFilter",
    "Filter",
    "all_of",
    "any_of",
    "SortCriterion",
    "LoanPipelineRequest",
    "filter_to_dict",
    "request_to_dict",
    "serialize",
    "serialize_filter",
    "FILTER_SCHEMA",
    "REQUEST_SCHEMA",
    "validate_filter_json",
    "validate_request_json",
    "LoanResult",
    "parse_loan_results",
]
