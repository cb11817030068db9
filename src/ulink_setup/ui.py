"""
UI utilities for consistent CLI output.

Provides icons, styling helpers, and output functions shared by the
installer steps, the orchestrator, and the interactive selector.
"""

from rich.console import Console
from rich.markup import escape

# Shared console instances
console = Console(soft_wrap=True, legacy_windows=False)
err_console = Console(stderr=True, soft_wrap=True, legacy_windows=False)

# Icons/symbols for consistent visual language
class Icons:
    """Unicode symbols for CLI output."""
    # Status
    SUCCESS = "✓"
    ERROR = "✗"
    WARNING = "!"

    # Selector
    POINTER = ">"
    CHECKED = "[x]"
    UNCHECKED = "[ ]"

    # Structure
    ARROW = "→"
    RULE = "─"
    INDENT = "  "


def success(message: str, prefix: bool = True) -> None:
    """Print a success message."""
    icon = f"[green]{Icons.SUCCESS}[/green] " if prefix else ""
    console.print(f"{Icons.INDENT}{icon}{message}")


def error(message: str, prefix: bool = True) -> None:
    """Print an error message to stderr."""
    icon = f"[red]{Icons.ERROR}[/red] " if prefix else ""
    err_console.print(f"{icon}[red]{escape(message)}[/red]")


def warning(message: str, prefix: bool = True) -> None:
    """Print a warning message."""
    icon = f"[yellow]{Icons.WARNING}[/yellow] " if prefix else ""
    console.print(f"{Icons.INDENT}{icon}[yellow]Warning: {message}[/yellow]")


def info(message: str, indent: int = 1) -> None:
    """Print an info message."""
    console.print(f"{Icons.INDENT * indent}{message}")


def header(title: str) -> None:
    """Print a section header."""
    console.print(f"{Icons.INDENT}[bold]{title}[/bold]")


def rule(width: int = 40) -> None:
    """Print a horizontal rule under a header."""
    console.print(f"{Icons.INDENT}{Icons.RULE * width}")


def path(p: str) -> str:
    """Format a file path."""
    return f"[cyan]{escape(p)}[/cyan]"


def kv(key: str, value: str, indent: int = 1) -> None:
    """Print a key-value pair."""
    prefix = Icons.INDENT * indent
    console.print(f"{prefix}[dim]{escape(key)}:[/dim] {escape(value)}")


def blank() -> None:
    """Print a blank line."""
    console.print()


def hint(message: str) -> None:
    """Print a helpful hint."""
    console.print(f"{Icons.INDENT}[dim]{Icons.ARROW} {message}[/dim]")


def command(argv: list[str], indent: int = 2) -> None:
    """Print a shell command the user can run by hand."""
    console.print(f"{Icons.INDENT * indent}{' '.join(argv)}", markup=False)


def next_steps(title: str, steps: list[str]) -> None:
    """Print a numbered list of follow-up steps under a title."""
    console.print(f"{Icons.INDENT}[bold]{title}:[/bold]")
    for i, step in enumerate(steps, 1):
        console.print(f"{Icons.INDENT * 2}{i}. {step}", markup=False)
    console.print()
