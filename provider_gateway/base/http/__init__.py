"""HTTP utilities package for the gateway.

Exposes pooled httpx clients and the JSON POST transport.
"""

from .client import get_httpx_client, close_all_clients
from .transport import HttpTransport, build_headers

__all__ = ["get_httpx_client", "close_all_clients", "HttpTransport", "build_headers"]
