from typing import Any

from .base import RemoteResponder
from .models import RemoteRequestConfig
from .providers import AzureOpenAIResponder


def create_remote_responder(provider: str = "azure", **config: Any) -> RemoteResponder:
    """Create a remote responder instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('azure' or 'azure-openai')
        **config: Provider-specific configuration
            For Azure OpenAI:
                - endpoint: str (required)
                - api_key: str (required)
                - deployment_name: str | None
                - api_version: str (default: '2024-02-15-preview')
                - temperature: float (default: 0.7)
                - max_tokens: int (default: 800)
                - system_prompt: str | None
                - history_window: int (default: 6)
                - any other keyword is passed to the AsyncAzureOpenAI client

    Returns:
        Initialized responder instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing
        ConfigurationError: If a required value is present but empty

    Examples:
        >>> responder = create_remote_responder(
        ...     "azure",
        ...     endpoint="https://my-resource.openai.azure.com",
        ...     api_key="...",
        ...     deployment_name="gpt-4"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower in ("azure", "azure-openai"):
        for key in ("endpoint", "api_key"):
            if key not in config:
                raise TypeError(f"Azure OpenAI responder requires '{key}' in config")

        request_fields = {
            name: config.pop(name)
            for name in list(config)
            if name in RemoteRequestConfig.model_fields
        }
        return AzureOpenAIResponder(RemoteRequestConfig(**request_fields), **config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'azure'"
    )
