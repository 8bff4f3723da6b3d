from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import ResultDecodeError

log = logging.getLogger("pipeline_filter.results")

# canonical field name -> LoanResult attribute
KNOWN_FIELDS: Dict[str, str] = {
    "Loan.LoanFolder": "loan_folder",
    "Loan.LoanNumber": "loan_number",
    "Loan.LoanRate": "loan_rate",
    "Loan.LoanAmount": "loan_amount",
    "Fields.4002": "fields_4002",
    "Loan.LastModified": "last_modified",
    "Loan.BorrowerName": "borrower_name",
    "Loan.LoanFolders": "loan_folders",
}


@dataclass(frozen=True)
class LoanResult:
    """
    One row of a loan pipeline response: the loan id plus the requested fields.
    Fields outside KNOWN_FIELDS are kept in `additional_fields`.
    """
    loan_id: str
    loan_folder: Optional[str] = None
    loan_number: Optional[str] = None
    loan_rate: Optional[str] = None
    loan_amount: Optional[str] = None
    fields_4002: Optional[str] = None
    last_modified: Optional[str] = None
    borrower_name: Optional[str] = None
    loan_folders: Optional[str] = None
    # compared but not hashed, so instances stay hashable
    additional_fields: Dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoanResult":
        if not isinstance(data, Mapping):
            raise ResultDecodeError(f"Loan result row must be an object, got {type(data).__name__}")
        # top-level keys are matched case-insensitively
        folded = {str(k).lower(): v for k, v in data.items()}

        loan_id = folded.get("loanid")
        if not isinstance(loan_id, str) or not loan_id:
            raise ResultDecodeError("Missing loanId")

        raw_fields = folded.get("fields") or {}
        if not isinstance(raw_fields, Mapping):
            raise ResultDecodeError(f"'fields' for loan {loan_id} must be an object")

        known: Dict[str, Optional[str]] = {}
        extra: Dict[str, str] = {}
        for name, value in raw_fields.items():
            attr = KNOWN_FIELDS.get(name)
            if attr is None:
                extra[name] = value
            else:
                known[attr] = value
        return cls(loan_id=loan_id, additional_fields=extra, **known)


def parse_loan_results(payload: Union[str, List[Mapping[str, Any]]]) -> List[LoanResult]:
    """
    Accept a JSON array (text or already-decoded list) of response rows and
    return LoanResult instances in response order.
    """
    if isinstance(payload, str):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ResultDecodeError(f"Response is not valid JSON: {e}") from e
    else:
        data = payload
    if not isinstance(data, list):
        raise ResultDecodeError(f"Expected a JSON array of loans, got {type(data).__name__}")
    results = [LoanResult.from_dict(row) for row in data]
    log.debug("Decoded %d loan results", len(results))
    return results


__all__ = ["KNOWN_FIELDS", "LoanResult", "parse_loan_results"]
