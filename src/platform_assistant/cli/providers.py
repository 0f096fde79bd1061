"""Factory functions for the CLI.

Centralizes creation of settings, responder and widget from environment
variables. Hides configuration details from command implementations.
"""

import logging

from rich.console import Console

from ..config import AssistantSettings
from ..errors import ConfigurationError
from ..llm import RemoteResponder, create_remote_responder
from ..resolver import ResponseResolver
from ..ui import ChatWidget

logger = logging.getLogger(__name__)

_console = Console()


def get_settings(use_remote: bool | None = None, log_level: str | None = None) -> AssistantSettings:
    """Read settings from the environment, applying command line overrides."""
    settings = AssistantSettings.from_env()
    overrides: dict[str, object] = {}
    if use_remote is not None:
        overrides["use_remote"] = use_remote
    if log_level is not None:
        overrides["log_level"] = log_level
    return settings.model_copy(update=overrides) if overrides else settings


def get_responder(settings: AssistantSettings, console: Console | None = None) -> RemoteResponder | None:
    """Create the remote responder, or None if it cannot be used.

    Args:
        settings: Assistant settings
        console: Optional Rich console for output

    Returns:
        Azure OpenAI responder, or None when not configured

    Environment variables:
        AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_API_KEY, AZURE_OPENAI_DEPLOYMENT_NAME,
        AZURE_OPENAI_API_VERSION
    """
    con = console or _console
    if not settings.is_configured:
        if settings.use_remote:
            con.print("[yellow]Warning: Azure OpenAI is not configured, using built-in answers[/yellow]")
        return None

    try:
        return create_remote_responder(
            "azure",
            endpoint=settings.endpoint,
            api_key=settings.api_key,
            deployment_name=settings.deployment_name,
            api_version=settings.api_version,
            history_window=settings.history_window,
        )
    except ConfigurationError as e:
        logger.warning("Remote responder unavailable: %s", e)
        return None


def build_widget(settings: AssistantSettings, console: Console | None = None) -> ChatWidget:
    """Create an open chat widget wired to the configured responder."""
    responder = get_responder(settings, console)
    widget = ChatWidget(
        ResponseResolver(responder=responder),
        is_configured=responder is not None and settings.is_configured,
        use_remote=settings.use_remote,
        history_window=settings.history_window,
    )
    widget.open()
    return widget
