"""Rich UI helpers for terminal output."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import PullRequestCreated, PullRequestRequest, RepoIdentity
from .payload import PullRequestPayload

console = Console()
err_console = Console(stderr=True)


def info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def error(kind: str, message: str) -> None:
    """Print an error message on stderr, labelled with its kind."""
    err_console.print(f"[red]✗ {kind} error:[/red] {escape(message)}", highlight=False)


def preview_request(identity: RepoIdentity, request: PullRequestRequest) -> None:
    """Show the branches and message about to be submitted."""

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Repository", identity.slug)
    table.add_row("From", request.head_branch)
    table.add_row("Into", request.target_branch)
    console.print(table)

    preview = f"[bold green]{escape(request.message.title)}[/bold green]"
    if request.message.body:
        preview += f"\n\n{escape(request.message.body)}"
    console.print(
        Panel(
            preview,
            title="Pull Request Preview",
            border_style="green",
            padding=(1, 2),
        )
    )


def show_payload(payload: PullRequestPayload, verbose: bool = False) -> None:
    if verbose:
        console.print("\n[bold]Request body:[/bold]")
        console.print(json.dumps(payload, indent=2))
        console.print()


def show_created(created: PullRequestCreated) -> None:
    success(f"Created pull request #{created.number}: {created.url}")
