"""Chat-completion client resolution.

Maps a ClientConfig onto exactly one ``openai`` SDK client. Resolution makes
no network calls; the returned client defers all I/O until it is used.
"""

from typing import Any, Dict, Mapping, Optional, Union
from openai import AzureOpenAI, OpenAI
from ..utils import setup_logger, UnknownProviderKind
from .models import ClientConfig, ProviderKind

logger = setup_logger(__name__)

ClientHandle = Union[OpenAI, AzureOpenAI]


def _transport_kwargs(config: ClientConfig) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    if config.max_retries is not None:
        kwargs["max_retries"] = config.max_retries
    if config.timeout is not None:
        kwargs["timeout"] = config.timeout
    return kwargs


def resolve_client(config: ClientConfig) -> ClientHandle:
    """Build a fresh client for the given configuration.

    Args:
        config: Validated client configuration

    Returns:
        OpenAI for the standard provider, AzureOpenAI for the enterprise one

    Raises:
        openai.OpenAIError: Propagated unchanged from the SDK constructor
    """
    api_key = config.api_key.get_secret_value()

    if config.kind is ProviderKind.ENTERPRISE:
        kwargs = _transport_kwargs(config)
        # api_version is passed exactly as supplied
        kwargs["api_version"] = config.api_version
        if config.deployment:
            kwargs["azure_deployment"] = config.deployment

        logger.info(
            f"Resolved {config.kind.value} client for endpoint {config.endpoint} "
            f"(api version {config.api_version})"
        )
        return AzureOpenAI(
            api_key=api_key,
            azure_endpoint=config.endpoint,
            **kwargs,
        )

    logger.info(f"Resolved {config.kind.value} client")
    return OpenAI(api_key=api_key, **_transport_kwargs(config))


def client_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientHandle:
    """Resolve a client from OPENAI_* environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ at call time)

    Returns:
        A ready-to-use client

    Raises:
        UnknownProviderKind: If OPENAI_TYPE is not recognized
        ConfigurationError: If a transport value cannot be parsed
    """
    try:
        config = ClientConfig.from_env(environ)
    except UnknownProviderKind as e:
        logger.error(str(e))
        raise

    return resolve_client(config)
