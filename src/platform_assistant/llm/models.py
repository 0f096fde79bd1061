from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_API_VERSION, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE


class RemoteRequestConfig(BaseModel):
    """Connection and sampling settings for the remote responder.

    Endpoint and key are optional here so that a partially configured
    environment can still be described; the responder rejects them at
    construction time.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str | None = Field(default=None, description="Azure OpenAI resource endpoint")
    api_key: str | None = Field(default=None, repr=False, description="Azure OpenAI API key")
    deployment_name: str | None = Field(default=None, description="Chat model deployment name")
    api_version: str = Field(default=DEFAULT_API_VERSION, description="API version query parameter")
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)


class LLMResponse(BaseModel):
    """Response from the remote responder."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str | None = Field(default=None, description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
