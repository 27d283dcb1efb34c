"""Contract for a contributions data source.

Why Protocol:
- Structural typing (duck typing) without rigid inheritance.
- The CLI can be driven by the real DevStats client or by a test double.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import QueryResponse


@runtime_checkable
class ContributionsSource(Protocol):
    """Minimal contract for fetching a contributions ranking.

    Design rules:
    - `fetch_contributions` is async because it performs network I/O.
    - Failures are raised as `core.domain.errors.DevStatsError` subclasses.
    """

    async def fetch_contributions(
        self,
        *,
        username: str,
        project: str,
        range: str,
        metric: str,
    ) -> QueryResponse:
        """Run one query and return the parsed ranking."""

        ...
