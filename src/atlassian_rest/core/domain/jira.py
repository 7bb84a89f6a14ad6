"""Modelos de Jira Platform (REST v3)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from atlassian_rest.core.domain.base import AtlassianModel


class UserScheme(AtlassianModel):
    """Usuario de Jira (respuesta de `/myself` y autores de comentarios)."""

    self_url: str | None = Field(default=None, alias="self")
    account_id: str | None = Field(default=None, description="Identificador global de la cuenta Atlassian.")
    account_type: str | None = None
    email_address: str | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None
    locale: str | None = None
    avatar_urls: dict[str, str] | None = None
    groups: dict[str, Any] | None = Field(default=None, description="Presente solo con `expand=groups`.")
    application_roles: dict[str, Any] | None = Field(
        default=None,
        description="Presente solo con `expand=applicationRoles`.",
    )


class ServerInformationScheme(AtlassianModel):
    base_url: str | None = None
    version: str | None = None
    version_numbers: list[int] = Field(default_factory=list)
    deployment_type: str | None = None
    build_number: int | None = None
    build_date: str | None = None
    server_time: str | None = None
    scm_info: str | None = None
    server_title: str | None = None


class IssueLabelsScheme(AtlassianModel):
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: list[str] = Field(default_factory=list)


class ResolutionScheme(AtlassianModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None


class CommentVisibilityScheme(AtlassianModel):
    type: str | None = None
    value: str | None = None


class IssueCommentScheme(AtlassianModel):
    """Comentario de incidencia.

    `body` es un documento ADF (Atlassian Document Format) en v3: se conserva
    como JSON sin esquema.
    """

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    author: UserScheme | None = None
    update_author: UserScheme | None = None
    body: Any = None
    rendered_body: str | None = None
    created: str | None = None
    updated: str | None = None
    jsd_public: bool | None = None
    visibility: CommentVisibilityScheme | None = None


class IssueCommentPageScheme(AtlassianModel):
    start_at: int = 0
    max_results: int = 0
    total: int = 0
    comments: list[IssueCommentScheme] = Field(default_factory=list)


class CommentPayloadScheme(AtlassianModel):
    """Cuerpo para crear un comentario (ADF en `body`)."""

    body: Any = Field(..., description="Documento ADF del comentario.")
    visibility: CommentVisibilityScheme | None = None


class IssueAttachmentScheme(AtlassianModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    filename: str | None = None
    author: UserScheme | None = None
    created: str | None = None
    size: int | None = None
    mime_type: str | None = None
    content: str | None = None
    thumbnail: str | None = None
