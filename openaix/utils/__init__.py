"""Utility modules for openaix."""

from .exceptions import OpenAIXError, ConfigurationError, UnknownProviderKind
from .logger import setup_logger

__all__ = [
    # Exceptions
    "OpenAIXError",
    "ConfigurationError",
    "UnknownProviderKind",
    # Logger
    "setup_logger",
]
