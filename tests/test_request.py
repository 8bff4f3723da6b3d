"""Tests for the request envelope builders"""

import dataclasses

import pytest

from pipeline_filter.enums import MatchType, SortOrder
from pipeline_filter.filters import StringFilter
from pipeline_filter.request import LoanPipelineRequest, SortCriterion


STATUS = StringFilter("Fields.Status", MatchType.EQUALS, "Active")


def test_defaults():
    req = LoanPipelineRequest()
    assert req.filter is None
    assert req.fields == ()
    assert req.sort == ()
    assert req.start is None and req.limit is None
    assert req.include_archived_loans is False


def test_with_fields_appends_and_returns_new_envelope():
    base = LoanPipelineRequest(STATUS, fields=["Fields.LoanNumber"])
    extended = base.with_fields("Fields.Status", "Loan.BorrowerName")
    assert extended.fields == ("Fields.LoanNumber", "Fields.Status", "Loan.BorrowerName")
    assert base.fields == ("Fields.LoanNumber",)
    assert extended is not base


def test_with_fields_without_names_is_a_no_op():
    base = LoanPipelineRequest(fields=("Fields.LoanNumber",))
    assert base.with_fields() is base
    assert base.with_fields().fields == ("Fields.LoanNumber",)


def test_with_sort_appends():
    first = SortCriterion("Fields.CreatedDate")
    second = SortCriterion("Fields.LoanNumber", SortOrder.DESCENDING)
    req = LoanPipelineRequest().with_sort(first).with_sort(second)
    assert req.sort == (first, second)
    assert first.order is SortOrder.ASCENDING


def test_with_sort_without_criteria_is_a_no_op():
    req = LoanPipelineRequest().with_sort(SortCriterion("Fields.X"))
    assert req.with_sort() is req


def test_with_pagination_replaces_both_values():
    req = LoanPipelineRequest().with_pagination(10, 25)
    assert (req.start, req.limit) == (10, 25)
    cleared = req.with_pagination(None, None)
    assert (cleared.start, cleared.limit) == (None, None)
    assert (req.start, req.limit) == (10, 25)


def test_include_archived():
    req = LoanPipelineRequest()
    assert req.include_archived().include_archived_loans is True
    assert req.include_archived().include_archived(False).include_archived_loans is False
    assert req.include_archived_loans is False


def test_filter_is_shared_by_reference():
    req = LoanPipelineRequest(STATUS).with_fields("Fields.X").include_archived()
    assert req.filter is STATUS


def test_with_filter_replaces_tree():
    other = StringFilter("Fields.Status", MatchType.NOT_EQUALS, "Closed")
    req = LoanPipelineRequest(STATUS)
    assert req.with_filter(other).filter is other
    assert req.filter is STATUS


def test_envelope_is_immutable():
    req = LoanPipelineRequest()
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.limit = 10
    with pytest.raises(dataclasses.FrozenInstanceError):
        SortCriterion("Fields.X").order = SortOrder.DESCENDING
