"""Custom exceptions for openaix."""


class OpenAIXError(Exception):
    """Base exception for all openaix errors."""
    pass


class ConfigurationError(OpenAIXError):
    """Raised when configuration is invalid or missing."""
    pass


class UnknownProviderKind(ConfigurationError):
    """Raised when OPENAI_TYPE names a provider kind we don't know."""

    def __init__(self, kind: str):
        """Initialize with the offending selector value.

        Args:
            kind: The unrecognized OPENAI_TYPE value
        """
        super().__init__(f"openaix: unknown OPENAI_TYPE: {kind}")
        self.kind = kind
