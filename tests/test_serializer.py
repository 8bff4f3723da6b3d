"""Tests for the JSON wire serializer"""

import json
from dataclasses import dataclass

import pytest

from pipeline_filter.enums import DatePrecision, MatchType, SortOrder
from pipeline_filter.errors import WireFormatError
from pipeline_filter.filters import (
    DateFilter,
    EmptyValueFilter,
    MultiValueFilter,
    NotEmptyValueFilter,
    StringFilter,
)
from pipeline_filter.request import LoanPipelineRequest, SortCriterion
from pipeline_filter.serializer import (
    filter_to_dict,
    request_to_dict,
    serialize,
    serialize_filter,
)


STATUS = StringFilter("Fields.Status", MatchType.EQUALS, "Active")
STATES = MultiValueFilter("Fields.States", ["CA", "TX", "NY"], False)


class TestLeafRendering:
    def test_string_filter_exact_output(self):
        assert serialize_filter(STATUS) == (
            '{"matchType":"equals","canonicalName":"Fields.Status","value":"Active"}'
        )

    def test_string_filter_with_include(self):
        f = StringFilter("Fields.Name", MatchType.STARTS_WITH, "Mc", include=False)
        assert filter_to_dict(f) == {
            "matchType": "startswith",
            "canonicalName": "Fields.Name",
            "value": "Mc",
            "include": False,
        }

    def test_multi_value_exact_output(self):
        assert serialize_filter(STATES) == (
            '{"matchType":"multivalue","canonicalName":"Fields.States",'
            '"value":["CA","TX","NY"],"include":false}'
        )

    def test_empty_multi_value_is_an_empty_list(self):
        assert filter_to_dict(MultiValueFilter("Fields.States", []))["value"] == []

    def test_date_filter_renders_precision_token(self):
        f = DateFilter("Fields.CreatedDate", MatchType.GREATER_THAN_OR_EQUALS, "2024-03", DatePrecision.MONTH)
        assert list(filter_to_dict(f).items()) == [
            ("matchType", "greaterthanorequals"),
            ("canonicalName", "Fields.CreatedDate"),
            ("value", "2024-03"),
            ("precision", "month"),
        ]

    def test_empty_and_not_empty_filters(self):
        assert filter_to_dict(EmptyValueFilter("Fields.X")) == {
            "matchType": "isempty",
            "canonicalName": "Fields.X",
            "value": "0001-01-01T00:00:00",
        }
        assert filter_to_dict(NotEmptyValueFilter("Fields.X"))["matchType"] == "isnotempty"

    def test_unknown_node_type_is_rejected(self):
        @dataclass(frozen=True)
        class Bogus:
            canonical_name: str = "x"

        with pytest.raises(TypeError):
            filter_to_dict(Bogus())


class TestCompositeRendering:
    def test_nested_terms(self):
        d1 = DateFilter("Fields.CreatedDate", MatchType.EQUALS, "2024-03-19")
        d2 = DateFilter("Fields.CreatedDate", MatchType.EQUALS, "2024-04-04")
        tree = STATUS.and_(STATES).and_(d1.or_(d2))
        rendered = filter_to_dict(tree)
        assert rendered["operator"] == "and"
        assert [t.get("operator") for t in rendered["terms"]] == [None, None, "or"]
        assert rendered["terms"][2]["terms"][1]["value"] == "2024-04-04"

    def test_composite_key_order(self):
        rendered = filter_to_dict(STATUS.or_(STATES))
        assert list(rendered) == ["operator", "terms"]


class TestRequestRendering:
    def test_minimal_request(self):
        assert serialize(LoanPipelineRequest()) == '{"includeArchivedLoans":false}'

    def test_omits_empty_and_absent_members(self):
        req = LoanPipelineRequest(STATUS).include_archived()
        assert serialize(req) == (
            '{"filter":{"matchType":"equals","canonicalName":"Fields.Status","value":"Active"},'
            '"includeArchivedLoans":true}'
        )

    def test_full_request_key_order(self):
        req = (
            LoanPipelineRequest(STATUS.and_(STATES))
            .with_fields("Fields.LoanNumber", "Fields.Status")
            .with_sort(SortCriterion("Fields.CreatedDate", SortOrder.DESCENDING))
            .with_pagination(0, 50)
            .include_archived()
        )
        data = request_to_dict(req)
        assert list(data) == ["filter", "fields", "sort", "start", "limit", "includeArchivedLoans"]
        assert data["sort"] == [{"canonicalName": "Fields.CreatedDate", "order": "descending"}]
        assert data["start"] == 0
        assert data["limit"] == 50

    def test_indentation_is_formatting_only(self):
        req = LoanPipelineRequest(STATUS.and_(STATES)).with_fields("Fields.LoanNumber")
        compact = serialize(req)
        pretty = serialize(req, indented=True)
        assert "\n" in pretty and "\n" not in compact
        assert json.loads(pretty) == json.loads(compact)

    def test_indent_width_from_settings(self, monkeypatch):
        monkeypatch.setenv("PIPELINE_FILTER_JSON_INDENT", "4")
        pretty = serialize(LoanPipelineRequest(), indented=True)
        assert pretty == '{\n    "includeArchivedLoans": false\n}'

    def test_non_ascii_is_kept(self):
        req = LoanPipelineRequest(StringFilter("Fields.City", MatchType.EQUALS, "Malmö"))
        assert "Malmö" in serialize(req)

    def test_to_json_delegates(self):
        req = LoanPipelineRequest(STATUS)
        assert req.to_json() == serialize(req)
        assert req.to_dict() == request_to_dict(req)

    def test_validate_output_setting(self, monkeypatch):
        monkeypatch.setenv("PIPELINE_FILTER_VALIDATE_OUTPUT", "true")
        assert json.loads(serialize(LoanPipelineRequest(STATUS)))["filter"]["value"] == "Active"

        bad = LoanPipelineRequest(StringFilter("", MatchType.EQUALS, "Active"))
        with pytest.raises(WireFormatError):
            serialize(bad)
