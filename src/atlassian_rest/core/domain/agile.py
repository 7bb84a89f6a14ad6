"""Modelos de Jira Software (Agile 1.0)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from atlassian_rest.core.domain.base import AtlassianModel


class SprintScheme(AtlassianModel):
    id: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    state: str | None = None
    name: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    complete_date: str | None = None
    origin_board_id: int | None = None
    goal: str | None = None


class SprintPayloadScheme(AtlassianModel):
    """Cuerpo de creación/actualización de sprint.

    Los campos `None` no se envían; en una actualización completa (PUT) Jira
    los interpreta como nulos.
    """

    name: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    origin_board_id: int | None = None
    goal: str | None = None
    state: str | None = None


class IssueOptionScheme(AtlassianModel):
    jql: str | None = None
    validate_query: bool = True
    fields: list[str] = Field(default_factory=list)
    expand: list[str] = Field(default_factory=list)


class SprintIssueScheme(AtlassianModel):
    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    expand: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)


class SprintIssuePageScheme(AtlassianModel):
    expand: str | None = None
    start_at: int = 0
    max_results: int = 0
    total: int = 0
    issues: list[SprintIssueScheme] = Field(default_factory=list)
