"""Rich console output utilities."""

from rich.console import Console
from rich.markup import escape


console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}", style="red")


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    err_console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")


def print_info(message: str) -> None:
    """Print a diagnostic message to stderr."""
    err_console.print(f"[blue]ℹ[/blue] {escape(message)}")
