"""openaix: resolve a chat-completion client from environment configuration.

Supports two wire-compatible backends selected by OPENAI_TYPE:
- "openai" (or unset): the standard OpenAI API
- "azure": an Azure OpenAI deployment (OPENAI_ENDPOINT, OPENAI_API_VERSION)
"""

__version__ = "1.0.0"

from .config import settings
from .client import (
    ProviderKind,
    ClientConfig,
    ClientHandle,
    resolve_client,
    client_from_env,
)
from .utils import OpenAIXError, ConfigurationError, UnknownProviderKind

__all__ = [
    # Version
    "__version__",
    # Config
    "settings",
    # Client
    "ProviderKind",
    "ClientConfig",
    "ClientHandle",
    "resolve_client",
    "client_from_env",
    # Errors
    "OpenAIXError",
    "ConfigurationError",
    "UnknownProviderKind",
]
