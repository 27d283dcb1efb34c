"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the DevStats wire shapes right at the edge.
- Field names double as the JSON contract of the `DevActCntComp` API.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

API_NAME = "DevActCntComp"
ALL_REPOSITORY_GROUPS = "All"
ALL_COUNTRIES = "All"
ALL_COMPANIES: tuple[str, ...] = ("All",)


class QueryPayload(BaseModel):
    """Inner `payload` object of a DevStats query."""

    model_config = ConfigDict(frozen=True)

    project: str = Field(..., description="Project scope, e.g. 'All CNCF'.")
    range: str = Field(..., description="Time window, e.g. 'Last quarter'.")
    metric: str = Field(..., description="Ranked quantity, e.g. 'Contributions'.")
    repository_group: str = Field(
        default=ALL_REPOSITORY_GROUPS,
        description="Repository group filter (always 'All').",
    )
    country: str = Field(
        default=ALL_COUNTRIES,
        description="Country filter (always 'All').",
    )
    companies: list[str] = Field(
        default_factory=lambda: list(ALL_COMPANIES),
        description="Company filter (always ['All']).",
    )
    github_id: str = Field(
        ...,
        min_length=1,
        description="GitHub login the query is about.",
    )


class QueryRequest(BaseModel):
    """Request body POSTed to the DevStats API."""

    model_config = ConfigDict(frozen=True)

    api: str = Field(default=API_NAME, description="DevStats API identifier.")
    payload: QueryPayload

    @classmethod
    def build(cls, *, username: str, project: str, range: str, metric: str) -> "QueryRequest":
        return cls(
            payload=QueryPayload(
                project=project,
                range=range,
                metric=metric,
                github_id=username,
            )
        )


class ContributionRow(BaseModel):
    """One ranked entry, i.e. one index across the response columns."""

    model_config = ConfigDict(frozen=True)

    rank: int
    login: str
    company: str
    number: int


class QueryResponse(BaseModel):
    """Successful DevStats response.

    The server encodes the ranking as four parallel columns; `rows()`
    turns them back into records in server order.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    project: str
    range: str
    metric: str
    rank: list[int]
    login: list[str]
    company: list[str]
    number: list[int]

    @model_validator(mode="after")
    def _check_columns_aligned(self) -> "QueryResponse":
        lengths = {len(self.rank), len(self.login), len(self.company), len(self.number)}
        if len(lengths) != 1:
            raise ValueError(
                "rank/login/company/number must have equal length "
                f"(got {len(self.rank)}/{len(self.login)}/{len(self.company)}/{len(self.number)})"
            )
        return self

    def rows(self) -> list[ContributionRow]:
        return [
            ContributionRow(rank=rank, login=login, company=company, number=number)
            for rank, login, company, number in zip(self.rank, self.login, self.company, self.number)
        ]


class ErrorPayload(BaseModel):
    """Body returned by the API on application-level failures."""

    model_config = ConfigDict(extra="ignore")

    error: str


class AggregatedResult(BaseModel):
    """Rows of a single user plus their summed contributions.

    `total == 0` is a real answer ("no contributions found"), not a missing one.
    """

    username: str
    project: str
    range: str
    metric: str
    rows: list[ContributionRow] = Field(default_factory=list)
    total: int = 0

    @property
    def found(self) -> bool:
        return self.total != 0
