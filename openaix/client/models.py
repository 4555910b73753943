"""Configuration models for chat-completion client resolution."""

import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from ..config import settings
from ..utils import ConfigurationError, UnknownProviderKind


class ProviderKind(str, Enum):
    """Backend variants a client can be configured for."""

    STANDARD = "openai"
    ENTERPRISE = "azure"

    @classmethod
    def parse(cls, value: Optional[str]) -> 'ProviderKind':
        """Parse an OPENAI_TYPE selector.

        An unset or empty selector means STANDARD. Any other value must match
        a member value exactly.

        Args:
            value: Raw selector string

        Returns:
            The matching ProviderKind

        Raises:
            UnknownProviderKind: If the value is not a known selector
        """
        if not value:
            return cls.STANDARD

        for kind in cls:
            if kind.value == value:
                return kind

        raise UnknownProviderKind(value)


class ClientConfig(BaseModel):
    """Everything needed to build one chat-completion client."""

    kind: ProviderKind = ProviderKind.STANDARD
    api_key: SecretStr = SecretStr("")

    # Enterprise only
    endpoint: str = ""
    api_version: str = ""
    deployment: Optional[str] = None

    # Transport tuning, SDK defaults when None
    max_retries: Optional[int] = Field(default=None, ge=0)
    timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: Any) -> ProviderKind:
        if isinstance(value, ProviderKind):
            return value
        return ProviderKind.parse(value)

    @property
    def is_enterprise(self) -> bool:
        return self.kind is ProviderKind.ENTERPRISE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ClientConfig':
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ at call time)

        Returns:
            Validated ClientConfig

        Raises:
            UnknownProviderKind: If OPENAI_TYPE is not recognized
            ConfigurationError: If a transport value cannot be parsed
        """
        env = os.environ if environ is None else environ

        kind = ProviderKind.parse(env.get("OPENAI_TYPE", ""))

        try:
            return cls(
                kind=kind,
                api_key=env.get("OPENAI_API_KEY", ""),
                endpoint=env.get("OPENAI_ENDPOINT", ""),
                api_version=env.get("OPENAI_API_VERSION", ""),
                deployment=env.get("OPENAI_DEPLOYMENT") or None,
                max_retries=_blank_to_none(
                    env.get("OPENAI_MAX_RETRIES") or settings.get("openai.max_retries")
                ),
                timeout=_blank_to_none(
                    env.get("OPENAI_TIMEOUT") or settings.get("openai.timeout")
                ),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid OpenAI configuration: {e}") from e

    def describe(self) -> Dict[str, Any]:
        """Summarize the config for display. The API key is never included."""
        summary: Dict[str, Any] = {"kind": self.kind.value}
        if self.is_enterprise:
            summary["endpoint"] = self.endpoint
            summary["api_version"] = self.api_version
            if self.deployment:
                summary["deployment"] = self.deployment
        if self.max_retries is not None:
            summary["max_retries"] = self.max_retries
        if self.timeout is not None:
            summary["timeout"] = self.timeout
        return summary


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value
