"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan los adaptadores concretos; el
Core depende de abstracciones, no de httpx.
"""

from atlassian_rest.core.interfaces.api_client import ApiClient

__all__ = ["ApiClient"]
