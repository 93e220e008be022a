"""API client for uigen."""

from uigen.ui.client.api_client import APIClient

__all__ = [
    "APIClient",
]
