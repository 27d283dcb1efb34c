"""DevStats API client.

Responsibility:
- Build the `DevActCntComp` query and POST it once to the DevStats endpoint.
- Map the HTTP outcome onto `QueryResponse` or a `DevStatsError`.

The HTTP status code alone decides which body shape is expected.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import ApiError, ParseFailed, RequestFailed
from core.domain.models import ErrorPayload, QueryRequest, QueryResponse
from core.interfaces.source import ContributionsSource

logger = logging.getLogger(__name__)


class DevStatsClient(ContributionsSource):
    """Fetch a contributions ranking from DevStats."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._http_client = http_client

    @property
    def url(self) -> str:
        return self._settings.api_url

    @staticmethod
    def build_request(*, username: str, project: str, range: str, metric: str) -> QueryRequest:
        if not username or not username.strip():
            raise ValueError("username must be a non-empty string")
        return QueryRequest.build(username=username, project=project, range=range, metric=metric)

    async def fetch_contributions(
        self,
        *,
        username: str,
        project: str,
        range: str,
        metric: str,
    ) -> QueryResponse:
        request = self.build_request(username=username, project=project, range=range, metric=metric)
        body = request.model_dump(mode="json")

        logger.debug("Sending request to: %s", self.url)
        logger.debug("Request body: %s", body)

        try:
            if self._http_client is not None:
                response = await self._http_client.post(self.url, json=body)
            else:
                async with build_async_client(self._settings) as client:
                    response = await client.post(self.url, json=body)
        except httpx.RequestError as exc:
            raise RequestFailed(str(exc) or type(exc).__name__) from exc

        logger.debug("Response status: %s", response.status_code)
        logger.debug("Raw response: %s", response.text)

        return self._parse(response)

    @staticmethod
    def _parse(response: httpx.Response) -> QueryResponse:
        if response.is_success:
            try:
                return QueryResponse.model_validate_json(response.content)
            except ValidationError as exc:
                raise ParseFailed(str(exc)) from exc

        try:
            error = ErrorPayload.model_validate_json(response.content)
        except ValidationError as exc:
            raise ParseFailed(str(exc)) from exc
        raise ApiError(error.error)
