"""Unit tests for the DevStats wire models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from core.domain.models import (
    ALL_COMPANIES,
    API_NAME,
    AggregatedResult,
    ContributionRow,
    ErrorPayload,
    QueryRequest,
    QueryResponse,
)


class TestQueryRequest:
    """Tests for the request body."""

    def test_build_fills_fixed_filters(self) -> None:
        request = QueryRequest.build(username="alice", project="All CNCF", range="Last quarter", metric="Contributions")
        assert request.api == API_NAME == "DevActCntComp"
        assert request.payload.repository_group == "All"
        assert request.payload.country == "All"
        assert request.payload.companies == list(ALL_COMPANIES) == ["All"]
        assert request.payload.github_id == "alice"

    def test_serializes_to_wire_shape(self) -> None:
        request = QueryRequest.build(username="alice", project="Kubernetes", range="Last year", metric="Commits")
        assert request.model_dump(mode="json") == {
            "api": "DevActCntComp",
            "payload": {
                "project": "Kubernetes",
                "range": "Last year",
                "metric": "Commits",
                "repository_group": "All",
                "country": "All",
                "companies": ["All"],
                "github_id": "alice",
            },
        }

    def test_round_trips_through_json(self) -> None:
        request = QueryRequest.build(username="bob", project="All CNCF", range="Last quarter", metric="Contributions")
        restored = QueryRequest.model_validate_json(request.model_dump_json())
        assert restored == request

    def test_is_immutable(self) -> None:
        request = QueryRequest.build(username="bob", project="P", range="R", metric="M")
        with pytest.raises(ValidationError):
            request.api = "Other"  # type: ignore[misc]

    def test_requires_github_id(self) -> None:
        with pytest.raises(ValidationError):
            QueryRequest.build(username="", project="P", range="R", metric="M")


class TestQueryResponse:
    """Tests for the columnar success payload."""

    def test_rows_rebuild_records_in_server_order(self, sample_response: QueryResponse) -> None:
        assert sample_response.rows() == [
            ContributionRow(rank=1, login="alice", company="A", number=5),
            ContributionRow(rank=2, login="bob", company="B", number=3),
        ]

    def test_rejects_misaligned_columns(self) -> None:
        with pytest.raises(ValidationError, match="equal length"):
            QueryResponse.model_validate(
                {
                    "project": "P",
                    "range": "R",
                    "metric": "M",
                    "rank": [1, 2],
                    "login": ["alice"],
                    "company": ["A", "B"],
                    "number": [5, 3],
                }
            )

    def test_empty_columns_are_valid(self) -> None:
        response = QueryResponse.model_validate(
            {"project": "P", "range": "R", "metric": "M", "rank": [], "login": [], "company": [], "number": []}
        )
        assert response.rows() == []

    def test_columns_are_required(self) -> None:
        with pytest.raises(ValidationError):
            QueryResponse.model_validate_json('{"project": "P", "range": "R", "metric": "M"}')

    @pytest.mark.parametrize("column", ["rank", "number"])
    def test_rejects_numbers_sent_as_strings(self, sample_body: dict, column: str) -> None:
        sample_body[column] = [str(value) for value in sample_body[column]]
        with pytest.raises(ValidationError):
            QueryResponse.model_validate_json(json.dumps(sample_body))

    def test_ignores_unknown_fields(self, sample_body: dict) -> None:
        sample_body["extra"] = "ignored"
        response = QueryResponse.model_validate(sample_body)
        assert not hasattr(response, "extra")

    def test_rejects_non_integer_numbers(self, sample_body: dict) -> None:
        sample_body["number"] = ["many", 3]
        with pytest.raises(ValidationError):
            QueryResponse.model_validate(sample_body)


def test_error_payload_reads_message() -> None:
    assert ErrorPayload.model_validate_json('{"error": "invalid project"}').error == "invalid project"


def test_aggregated_result_zero_total_is_not_found() -> None:
    result = AggregatedResult(username="carol", project="P", range="R", metric="M")
    assert result.total == 0
    assert result.rows == []
    assert result.found is False
