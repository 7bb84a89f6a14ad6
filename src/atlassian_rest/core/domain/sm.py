"""Modelos de Jira Service Management (`servicedeskapi`).

Las páginas de esta API usan `start`/`limit`/`isLastPage` y enlaces en
`_links`, a diferencia de Jira Platform (`startAt`/`maxResults`).
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from atlassian_rest.core.domain.base import AtlassianModel


class LinkScheme(AtlassianModel):
    self_url: str | None = Field(default=None, alias="self")
    base: str | None = None
    context: str | None = None
    next: str | None = None
    prev: str | None = None


class OrganizationScheme(AtlassianModel):
    id: str | None = None
    name: str | None = None
    links: LinkScheme | None = Field(default=None, alias="_links")


class OrganizationPageScheme(AtlassianModel):
    size: int = 0
    start: int = 0
    limit: int = 0
    is_last_page: bool = False
    values: list[OrganizationScheme] = Field(default_factory=list)
    links: LinkScheme | None = Field(default=None, alias="_links")


class CustomerScheme(AtlassianModel):
    account_id: str | None = None
    name: str | None = None
    key: str | None = None
    email_address: str | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None


class OrganizationUsersPageScheme(AtlassianModel):
    size: int = 0
    start: int = 0
    limit: int = 0
    is_last_page: bool = False
    values: list[CustomerScheme] = Field(default_factory=list)
    links: LinkScheme | None = Field(default=None, alias="_links")


class RequestAttachmentScheme(AtlassianModel):
    filename: str | None = None
    author: CustomerScheme | None = None
    created: dict[str, Any] | None = None
    size: int | None = None
    mime_type: str | None = None
    links: dict[str, str] | None = Field(default=None, alias="_links")


class RequestAttachmentPageScheme(AtlassianModel):
    size: int = 0
    start: int = 0
    limit: int = 0
    is_last_page: bool = False
    values: list[RequestAttachmentScheme] = Field(default_factory=list)
    links: LinkScheme | None = Field(default=None, alias="_links")


class RequestAttachmentCreationScheme(AtlassianModel):
    comment: dict[str, Any] | None = None
    attachments: RequestAttachmentPageScheme | None = None


class ServiceDeskScheme(AtlassianModel):
    id: str | None = None
    project_id: str | None = None
    project_name: str | None = None
    project_key: str | None = None
    links: LinkScheme | None = Field(default=None, alias="_links")


class ServiceDeskPageScheme(AtlassianModel):
    size: int = 0
    start: int = 0
    limit: int = 0
    is_last_page: bool = False
    values: list[ServiceDeskScheme] = Field(default_factory=list)
    links: LinkScheme | None = Field(default=None, alias="_links")


class TemporaryFileScheme(AtlassianModel):
    temporary_attachment_id: str | None = None
    file_name: str | None = None


class ServiceDeskTemporaryFileScheme(AtlassianModel):
    temporary_attachments: list[TemporaryFileScheme] = Field(default_factory=list)
