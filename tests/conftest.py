"""Shared fixtures for tests."""

from __future__ import annotations

from typing import Any

import pytest

from core.domain.models import QueryResponse


@pytest.fixture
def sample_body() -> dict[str, Any]:
    """Return a successful DevStats response body with two ranked users."""
    return {
        "project": "P",
        "range": "R",
        "metric": "M",
        "rank": [1, 2],
        "login": ["alice", "bob"],
        "company": ["A", "B"],
        "number": [5, 3],
    }


@pytest.fixture
def sample_response(sample_body: dict[str, Any]) -> QueryResponse:
    """Return the parsed form of `sample_body`."""
    return QueryResponse.model_validate(sample_body)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Isolate settings from the developer's environment and .env files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("API_URL", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "DEFAULT_PROJECT", "DEFAULT_RANGE", "DEFAULT_METRIC"):
        monkeypatch.delenv(f"DEVSTATS_{name}", raising=False)
