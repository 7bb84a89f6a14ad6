"""Jira Platform: cliente y servicios por recurso."""

from atlassian_rest.adapters.jira.client import IssueServices, JiraClient

__all__ = ["IssueServices", "JiraClient"]
