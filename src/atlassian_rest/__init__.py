"""Cliente REST para Jira, Jira Software, Jira Service Management y Confluence.

Todas las operaciones pasan por un único núcleo de transporte
(`atlassian_rest.adapters.transport.Client`): construcción de peticiones,
autenticación, negociación de contenido y normalización de respuestas.
"""

from atlassian_rest.adapters.agile import AgileClient
from atlassian_rest.adapters.auth import AuthenticationService, Credentials
from atlassian_rest.adapters.confluence import ConfluenceClient
from atlassian_rest.adapters.jira import JiraClient
from atlassian_rest.adapters.sm import ServiceManagementClient
from atlassian_rest.adapters.transport import Client
from atlassian_rest.core.config import AppSettings
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.request import PreparedRequest
from atlassian_rest.core.domain.response import ResponseScheme

__version__ = "0.1.0"

__all__ = [
    "AgileClient",
    "AppSettings",
    "AuthenticationService",
    "Client",
    "ConfluenceClient",
    "Context",
    "Credentials",
    "JiraClient",
    "PreparedRequest",
    "ResponseScheme",
    "ServiceManagementClient",
]
