"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..errors import SubmissionRejectedError
from ..intents import IntentMatcher
from ..log import configure_logging
from ..ui import ChatWidget, render_markup, strip_markup
from .providers import build_widget, get_settings

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="platform-assistant",
    help="Help assistant for the Code Migration Platform",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()

_EXIT_COMMANDS = {"exit", "quit", "/exit", "/quit"}


async def _close(widget: ChatWidget) -> None:
    responder = widget.resolver.responder
    if responder is not None:
        await responder.close()


def _print_answer(content: str, source: str) -> None:
    console.print(Panel(
        render_markup(content),
        title="[bold]Assistant[/bold]",
        subtitle=f"[dim]{source}[/dim]",
        border_style="cyan",
        expand=False,
    ))


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question about the platform"),
    no_ai: bool = typer.Option(
        False,
        "--no-ai",
        help="Answer from the built-in rules only"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print the answer as plain text"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="debug, info, warning or error"
    )
):
    """Answer a single question."""
    settings = get_settings(use_remote=False if no_ai else None, log_level=log_level)
    configure_logging(settings.log_level)

    async def _ask():
        widget = build_widget(settings, console)
        try:
            reply = await widget.submit(question)
        finally:
            await _close(widget)
        return reply, widget.last_resolution

    reply, resolution = asyncio.run(_ask())
    if reply is None:
        console.print("[red]Error: question is empty[/red]")
        raise typer.Exit(code=1)

    if plain:
        typer.echo(strip_markup(reply.content))
    else:
        _print_answer(reply.content, resolution.source.value if resolution else "")


@app.command()
def chat(
    no_ai: bool = typer.Option(
        False,
        "--no-ai",
        help="Start with AI answers turned off"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="debug, info, warning or error"
    )
):
    """Start an interactive conversation.

    Type /ai to toggle AI answers, /minimize to hide or show the input,
    and exit or quit to leave.
    """
    settings = get_settings(use_remote=False if no_ai else None, log_level=log_level)
    configure_logging(settings.log_level)

    async def _chat():
        widget = build_widget(settings, console)
        console.print(Panel(
            render_markup(widget.messages[0].content),
            title="[bold]Help Assistant[/bold]",
            subtitle=f"[dim]{widget.status_line}[/dim]",
            border_style="cyan",
        ))
        try:
            while widget.is_open:
                try:
                    text = console.input("[bold blue]You[/bold blue]: ")
                except (EOFError, KeyboardInterrupt):
                    break

                command = text.strip().lower()
                if command in _EXIT_COMMANDS:
                    widget.close()
                    continue
                if command == "/ai":
                    widget.toggle_remote()
                    console.print(f"[dim]{widget.status_line}[/dim]")
                    continue
                if command == "/minimize":
                    state = widget.toggle_minimize()
                    console.print(f"[dim]Widget {state.value}[/dim]")
                    continue

                try:
                    reply = await widget.submit(text)
                except SubmissionRejectedError as e:
                    console.print(f"[yellow]{e}[/yellow]")
                    continue
                if reply is None:
                    continue

                resolution = widget.last_resolution
                _print_answer(reply.content, resolution.source.value if resolution else "")
        finally:
            await _close(widget)

    asyncio.run(_chat())
    console.print("[dim]Goodbye![/dim]")


@app.command()
def intents():
    """Show the built-in answer rules in priority order."""
    matcher = IntentMatcher()

    table = Table(title="Answer Rules")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Answer preview")

    for position, rule in enumerate(matcher.rules, 1):
        preview = strip_markup(rule.response).splitlines()[0]
        table.add_row(str(position), rule.name, preview)

    console.print(table)


@app.command()
def status():
    """Show how the assistant is configured."""
    settings = get_settings()

    def _mask(value: str | None) -> str:
        if not value:
            return "[red]not set[/red]"
        return f"{value[:4]}..." if len(value) > 8 else "****"

    table = Table(title="Assistant Configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Endpoint", settings.endpoint or "[red]not set[/red]")
    table.add_row("API key", _mask(settings.api_key))
    table.add_row("Deployment", settings.deployment_name or "[red]not set[/red]")
    table.add_row("API version", settings.api_version)
    table.add_row("Use AI", "yes" if settings.use_remote else "no")
    table.add_row(
        "Mode",
        "[green]AI-powered[/green]" if settings.is_configured and settings.use_remote
        else "[yellow]Built-in answers[/yellow]"
    )

    console.print(table)


if __name__ == "__main__":
    app()
