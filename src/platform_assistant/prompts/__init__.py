"""Prompt text for the assistant.

The system prompt and greeting live in text files next to this module so
they can be edited without touching code. A ``prompts/`` directory in the
working directory takes precedence over the packaged files.
"""

from functools import lru_cache
from pathlib import Path

_PROMPTS_DIR = Path(__file__).parent


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Load a prompt by name.

    Search order:
    1. ./prompts/{name}.txt in the working directory
    2. platform_assistant/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If no prompt file exists in either location
    """
    filename = f"{name}.txt"

    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8").strip()

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8").strip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def get_system_prompt() -> str:
    """Instructions sent as the first message of every remote request."""
    return load_prompt("system")


def get_greeting() -> str:
    """First assistant message shown when a conversation starts."""
    return load_prompt("greeting")


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "clear_cache",
    "get_greeting",
    "get_system_prompt",
    "load_prompt",
]
