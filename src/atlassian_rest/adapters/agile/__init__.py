"""Jira Software (Agile)."""

from atlassian_rest.adapters.agile.client import AgileClient

__all__ = ["AgileClient"]
