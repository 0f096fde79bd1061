import logging
from collections.abc import Sequence
from typing import Any

from openai import APIError, APIStatusError, AsyncAzureOpenAI

from ...config import HISTORY_WINDOW
from ...conversation import ConversationTurn, Role
from ...errors import ConfigurationError, RemoteCallError
from ..base import RemoteResponder
from ..models import LLMResponse, RemoteRequestConfig

logger = logging.getLogger(__name__)


def _extract_content(completion: Any) -> str | None:
    """Get the first choice's message content, or None if it is missing."""
    try:
        return completion.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        return None


class AzureOpenAIResponder(RemoteResponder):
    """Remote responder backed by an Azure OpenAI chat deployment.

    Hidden design decisions:
    - Azure OpenAI client initialization (deployment-scoped URLs, api-key header)
    - Message assembly from system prompt, history window and user text
    - Mapping SDK errors onto RemoteCallError
    - Single attempt per call (SDK retries are disabled)
    """

    def __init__(
        self,
        config: RemoteRequestConfig,
        system_prompt: str | None = None,
        history_window: int = HISTORY_WINDOW,
        **client_kwargs: Any
    ):
        """Initialize the Azure OpenAI responder.

        Args:
            config: Endpoint, credentials and sampling settings
            system_prompt: Optional custom system prompt (or loaded from prompts/system.txt)
            history_window: Number of most recent turns sent with each request
            **client_kwargs: Additional kwargs for AsyncAzureOpenAI (e.g. http_client)

        Raises:
            ConfigurationError: If endpoint or API key is missing
        """
        if not config.endpoint:
            raise ConfigurationError("Azure OpenAI endpoint is missing")
        if not config.api_key:
            raise ConfigurationError("Azure OpenAI API key is missing")

        if system_prompt is None:
            from ...prompts import get_system_prompt
            system_prompt = get_system_prompt()

        self._config = config
        self._system_prompt = system_prompt
        self._history_window = history_window
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncAzureOpenAI(
            azure_endpoint=config.endpoint,
            api_key=config.api_key,
            api_version=config.api_version,
            **client_kwargs
        )

    @property
    def config(self) -> RemoteRequestConfig:
        return self._config

    def build_messages(
        self,
        user_text: str,
        history: Sequence[ConversationTurn]
    ) -> list[dict[str, str]]:
        """Assemble the request messages.

        Returns:
            System prompt, then the last ``history_window`` turns, then the user message
        """
        window = list(history)[-self._history_window:] if self._history_window > 0 else []
        return [
            {"role": Role.SYSTEM.value, "content": self._system_prompt},
            *(turn.to_payload() for turn in window),
            {"role": Role.USER.value, "content": user_text},
        ]

    async def chat_completion(self, messages: list[dict[str, str]]) -> LLMResponse:
        """Send one chat-completion request.

        Args:
            messages: Messages in chat-completion format

        Returns:
            LLMResponse with the first choice's content

        Raises:
            ConfigurationError: If the deployment name is missing
            RemoteCallError: On any transport or response failure
        """
        deployment = self._config.deployment_name
        if not deployment:
            raise ConfigurationError("Azure OpenAI deployment name is missing")

        logger.debug(
            "Requesting chat completion from deployment %s with %d messages",
            deployment,
            len(messages),
        )

        try:
            completion = await self._client.chat.completions.create(
                model=deployment,
                messages=messages,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )
        except APIStatusError as e:
            raise RemoteCallError(
                f"Azure OpenAI API request failed: {e.status_code}",
                status_code=e.status_code,
            ) from e
        except APIError as e:
            raise RemoteCallError(f"Azure OpenAI API request failed: {e}") from e

        content = _extract_content(completion)
        if not content:
            raise RemoteCallError("empty content")

        usage = None
        if getattr(completion, "usage", None):
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }

        return LLMResponse(
            content=content,
            model=getattr(completion, "model", None),
            usage=usage
        )

    async def respond(self, user_text: str, history: Sequence[ConversationTurn]) -> str:
        """Answer the user message using the deployment."""
        response = await self.chat_completion(self.build_messages(user_text, history))
        if response.usage:
            logger.debug("Token usage: %s", response.usage)
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()
