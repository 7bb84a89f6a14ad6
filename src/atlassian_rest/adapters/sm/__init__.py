"""Jira Service Management."""

from atlassian_rest.adapters.sm.client import ServiceManagementClient

__all__ = ["ServiceManagementClient"]
