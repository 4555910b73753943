"""Chat-completion client resolution.

Usage:
    client = client_from_env()
    response = client.chat.completions.create(model=..., messages=...)
"""

from .models import ProviderKind, ClientConfig
from .factory import ClientHandle, resolve_client, client_from_env

__all__ = [
    "ProviderKind",
    "ClientConfig",
    "ClientHandle",
    "resolve_client",
    "client_from_env",
]
