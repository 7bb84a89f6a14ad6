"""Modelos de Confluence (contenido y adjuntos)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from atlassian_rest.core.domain.base import AtlassianModel


class ContentScheme(AtlassianModel):
    id: str | None = None
    type: str | None = None
    status: str | None = None
    title: str | None = None
    metadata: dict[str, Any] | None = None
    extensions: dict[str, Any] | None = None
    links: dict[str, str] | None = Field(default=None, alias="_links")


class ContentPageScheme(AtlassianModel):
    results: list[ContentScheme] = Field(default_factory=list)
    start: int = 0
    limit: int = 0
    size: int = 0
    links: dict[str, str] | None = Field(default=None, alias="_links")


class GetContentAttachmentsOptionsScheme(AtlassianModel):
    expand: list[str] = Field(default_factory=list)
    file_name: str | None = None
    media_type: str | None = None
