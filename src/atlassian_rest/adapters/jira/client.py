"""Raíz de composición de Jira Platform (REST v3)."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from atlassian_rest.adapters.auth import AuthenticationService
from atlassian_rest.adapters.jira.attachment import AttachmentService
from atlassian_rest.adapters.jira.comment import CommentService
from atlassian_rest.adapters.jira.label import LabelService
from atlassian_rest.adapters.jira.myself import MySelfService
from atlassian_rest.adapters.jira.resolution import ResolutionService
from atlassian_rest.adapters.jira.server import ServerService
from atlassian_rest.adapters.transport import Client
from atlassian_rest.core.config import AppSettings


@dataclass(frozen=True)
class IssueServices:
    comment: CommentService
    attachment: AttachmentService


class JiraClient(Client):
    api_version = "3"

    def __init__(
        self,
        site: str,
        http: httpx.Client | None = None,
        auth: AuthenticationService | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__(site, http, auth, settings=settings)

        version = self.api_version
        self.myself = MySelfService(self, version)
        self.server = ServerService(self, version)
        self.label = LabelService(self, version)
        self.resolution = ResolutionService(self, version)
        self.issue = IssueServices(
            comment=CommentService(self, version),
            attachment=AttachmentService(self, version),
        )
