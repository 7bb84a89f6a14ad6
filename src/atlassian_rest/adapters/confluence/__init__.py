"""Confluence."""

from atlassian_rest.adapters.confluence.client import ConfluenceClient

__all__ = ["ConfluenceClient"]
