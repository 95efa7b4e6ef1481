"""Rich display utilities for CLI output."""

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from portfolio_contact.models.submission import Submission

console = Console()


def format_datetime(dt: datetime | None) -> str:
    """Format a datetime for display.

    Args:
        dt: Datetime to format.

    Returns:
        Formatted string or 'N/A'.
    """
    if dt is None:
        return "N/A"
    return dt.strftime("%Y-%m-%d %H:%M UTC")


def _truncate(text: str, length: int) -> str:
    return text[:length] + "..." if len(text) > length else text


def create_submissions_table(submissions: list[Submission]) -> Table:
    """Create a table listing stored submissions.

    Args:
        submissions: Submissions in stored order.

    Returns:
        Rich Table object.
    """
    table = Table(title="Contact Submissions", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Email", style="magenta")
    table.add_column("Subject", style="white")
    table.add_column("Received", style="dim")

    for idx, submission in enumerate(submissions, 1):
        table.add_row(
            str(idx),
            submission.id,
            escape(_truncate(submission.name, 25)),
            escape(submission.email),
            escape(_truncate(submission.subject, 40)),
            format_datetime(submission.timestamp),
        )

    return table


def create_submission_panel(submission: Submission) -> Panel:
    """Create a panel displaying one submission in full.

    Submitted text is escaped so brackets are shown literally.
    """
    sender = escape(f"{submission.name} <{submission.email}>")
    lines = [
        f"[bold]From:[/bold] {sender}",
        f"[bold]Subject:[/bold] {escape(submission.subject)}",
        f"[bold]Received:[/bold] {format_datetime(submission.timestamp)}",
        "",
        escape(submission.message),
    ]
    return Panel(
        "\n".join(lines),
        title=f"[bold]Submission: {submission.id}[/bold]",
        border_style="blue",
    )


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
