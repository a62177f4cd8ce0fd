"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from lectern.config.exceptions import ConfigError
from lectern.exceptions import (
    EmitError,
    LecternError,
    LinkError,
    MetadataError,
    NotADirectory,
    OutputTreeError,
    ReservedGlobalKey,
)
from lectern.rendering.exceptions import TemplateRegistryError

console = Console(stderr=True)

_LABELS: tuple[tuple[type[Exception], str], ...] = (
    (ConfigError, "Configuration Error"),
    (NotADirectory, "Missing Directory"),
    (MetadataError, "Frontmatter Error"),
    (LinkError, "Broken Post Link"),
    (ReservedGlobalKey, "Configuration Error"),
    (TemplateRegistryError, "Template Error"),
    (OutputTreeError, "Output Tree Error"),
    (EmitError, "Write Error"),
    (OSError, "I/O Error"),
)


def _label_for(exc: Exception) -> str | None:
    for error_type, label in _LABELS:
        if isinstance(exc, error_type):
            return label
    return None


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise with the full traceback. If False, print a one-line error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except (LecternError, OSError) as e:
        if debug:
            raise
        label = _label_for(e) or "Build Failed"
        console.print(f"[bold red]{label}:[/bold red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {escape(str(e))}", highlight=False)
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
