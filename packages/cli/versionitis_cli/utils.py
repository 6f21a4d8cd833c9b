"""Console helpers shared by the CLI commands."""
import typer
from rich.console import Console
from rich.markup import escape

from versionitis_common import VersionitisError

console = Console(soft_wrap=True)


def success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")


def warning(message: str) -> None:
    console.print(f"[bold yellow]![/bold yellow] {message}")


def info(message: str) -> None:
    console.print(f"[cyan]i[/cyan] {message}")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """
    Print an exception for the user.

    Versionitis errors show their code; anything else shows its type.
    With ``verbose`` the traceback is printed as well.
    """
    if isinstance(e, VersionitisError):
        error(escape(f"[{e.code}] {e.message}"))
    elif isinstance(e, FileNotFoundError):
        error(escape(str(e)))
    else:
        error(escape(f"{type(e).__name__}: {e}"))
    if verbose:
        console.print_exception()


def confirm_action(message: str, default: bool = False) -> bool:
    return typer.confirm(message, default=default)
