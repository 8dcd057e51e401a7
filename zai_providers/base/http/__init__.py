"""HTTP utilities package for providers.

Exposes pooled httpx clients and the vendor API client.
"""

from .client import get_httpx_client, close_all_clients
from .api_client import ApiClient, AuthMethod

__all__ = ["get_httpx_client", "close_all_clients", "ApiClient", "AuthMethod"]
