"""CLI commands for sessionbrief."""

import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from sessionbrief import __logo__, __version__
from sessionbrief.cli.styles import ICONS, styled
from sessionbrief.config.loader import load_config
from sessionbrief.context.extractor import extract_conversation_context
from sessionbrief.session.reader import SessionFileReader

app = typer.Typer(
    name="sessionbrief",
    help=f"{__logo__} sessionbrief - Conversation context from Claude Code sessions",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} sessionbrief v{__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    logger.enable("sessionbrief")


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
):
    """sessionbrief - Conversation context from Claude Code sessions."""
    _setup_logging(verbose)


def _emit(path: Path | str, turns: int | None, reader: SessionFileReader) -> None:
    """Extract context from *path* and print it, or explain why not."""
    try:
        result = asyncio.run(extract_conversation_context(path, turns, reader=reader))
    except FileNotFoundError:
        err_console.print(styled("error", f"{ICONS['error']} Session file not found: {path}"))
        raise typer.Exit(1)
    except OSError as e:
        err_console.print(styled("error", f"{ICONS['error']} Failed to read {path}: {e}"))
        raise typer.Exit(1)

    if result is None:
        err_console.print(styled("muted", "No conversation context found."))
        return

    # Plain output so the summary can be piped as-is.
    typer.echo(result)


# ============================================================================
# Extraction
# ============================================================================


@app.command()
def extract(
    path: Path = typer.Argument(..., help="Session transcript (.jsonl)"),
    turns: int = typer.Option(None, "--turns", "-n", min=0, help="Recent turns to keep"),
):
    """Print the mission and recent turns of a session transcript."""
    config = load_config()
    _emit(path, turns, SessionFileReader(config.claude_path))


@app.command()
def latest(
    cwd: Path = typer.Option(None, "--cwd", help="Project directory (default: current)"),
    turns: int = typer.Option(None, "--turns", "-n", min=0, help="Recent turns to keep"),
):
    """Extract context from the newest session of a project."""
    config = load_config()
    reader = SessionFileReader(config.claude_path)
    project = cwd or Path.cwd()

    path = reader.find_latest_session(project)
    if path is None:
        err_console.print(
            styled("warning", f"{ICONS['warning']} No sessions found for {project}")
        )
        raise typer.Exit(1)

    _emit(path, turns, reader)


# ============================================================================
# Sessions
# ============================================================================


@app.command()
def sessions(
    cwd: Path = typer.Option(None, "--cwd", help="Project directory (default: current)"),
    all_projects: bool = typer.Option(False, "--all", "-a", help="List sessions of every project"),
):
    """List recorded sessions, newest first."""
    config = load_config()
    reader = SessionFileReader(config.claude_path)
    items = reader.list_sessions(None if all_projects else (cwd or Path.cwd()))

    if not items:
        console.print("No sessions found.")
        return

    table = Table(title="Sessions")
    table.add_column("Session ID", style="cyan")
    table.add_column("Updated")
    table.add_column("Working dir", style="dim")

    for item in items:
        table.add_row(item["session_id"], item["updated_at"][:16], item["cwd"] or "-")

    console.print(table)
