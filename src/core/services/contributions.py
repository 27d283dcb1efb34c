"""Contribution lookup for a single user.

The CLI delegates the query and the aggregation to these helpers so that
printing stays in `cli.ui_components` and the filter-and-fold can be tested
without a terminal.
"""

from __future__ import annotations

import logging

from core.domain.models import AggregatedResult, QueryResponse
from core.interfaces.source import ContributionsSource

logger = logging.getLogger(__name__)


def summarize_contributions(username: str, response: QueryResponse) -> AggregatedResult:
    """Keep the rows whose login is exactly `username` and sum their numbers.

    Server order is preserved and the response is left untouched.
    """

    rows = [row for row in response.rows() if row.login == username]
    return AggregatedResult(
        username=username,
        project=response.project,
        range=response.range,
        metric=response.metric,
        rows=rows,
        total=sum(row.number for row in rows),
    )


async def lookup_contributions(
    source: ContributionsSource,
    *,
    username: str,
    project: str,
    range: str,
    metric: str,
) -> AggregatedResult:
    """Run the query against `source` and aggregate it for `username`."""

    response = await source.fetch_contributions(
        username=username,
        project=project,
        range=range,
        metric=metric,
    )
    result = summarize_contributions(username, response)
    logger.debug(
        "Matched %d of %d rows for %s (total=%d)",
        len(result.rows),
        len(response.rank),
        username,
        result.total,
    )
    return result
