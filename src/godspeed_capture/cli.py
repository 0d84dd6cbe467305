"""Command-line entry point: capture one task from args or stdin."""

import logging
import sys
from enum import IntEnum

import typer
from rich.console import Console
from rich.markup import escape

from .config import Settings, ensure_directories, get_settings
from .exceptions import MissingCredentialError, StorageError
from .services.godspeed_client import GodspeedClient
from .services.notifier import Notifier, build_notifier
from .services.orchestrator import CaptureOutcome, TaskSubmitter

app = typer.Typer(help="Capture a task into Godspeed", add_completion=False)
console = Console(stderr=True)

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit status per outcome."""

    OK = 0
    SUBMISSION_FAILED = 1
    MISSING_CREDENTIAL = 3
    INVALID_TASK = 4
    STORAGE_ERROR = 5


def _read_input(words: list[str] | None) -> str:
    """Join arguments, or read all of stdin when there are none."""
    if words:
        return " ".join(words)
    return sys.stdin.read().rstrip()


def _build_submitter(settings: Settings, notifier: Notifier) -> TaskSubmitter:
    client = GodspeedClient.from_settings(settings)
    return TaskSubmitter.from_settings(settings, client, notifier)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command(context_settings={"ignore_unknown_options": True})
def capture(
    words: list[str] = typer.Argument(
        None, help="Task shorthand, e.g. 'Buy milk @errands :15 .shopping n: get 2%'"
    ),
):
    """Submit a task, retrying any previously queued ones first."""
    settings = get_settings()
    _configure_logging(settings)
    notifier = build_notifier(settings)

    try:
        ensure_directories(settings)
    except StorageError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(ExitCode.STORAGE_ERROR)

    try:
        settings.require_api_key()
    except MissingCredentialError as e:
        notifier.notify(str(e))
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(ExitCode.MISSING_CREDENTIAL)

    task_text = _read_input(words)
    submitter = _build_submitter(settings, notifier)
    outcome = submitter.capture(task_text)
    logger.info(f"{len(submitter.queue)} task(s) waiting in the retry queue")

    if outcome == CaptureOutcome.QUEUED:
        console.print(f"[yellow]Failed to send task, queued for retry: {escape(task_text)}[/yellow]")
        raise typer.Exit(ExitCode.SUBMISSION_FAILED)
    if outcome == CaptureOutcome.REJECTED:
        console.print("[red]Error: Multiple lists specified[/red]")
        raise typer.Exit(ExitCode.INVALID_TASK)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
