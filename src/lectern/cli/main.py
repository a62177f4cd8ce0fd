"""Main Typer application for Lectern."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from lectern import __version__
from lectern.cli.errorhandler import handle_cli_errors
from lectern.config import load_site_config
from lectern.content.posts import index_posts
from lectern.logging_setup import configure_logging
from lectern.site.build import build_site

app = typer.Typer(
    name="lectern",
    help="Compile a tree of Markdown pages and blog posts into a static HTML site",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to config.yaml (defaults to ./config.yaml)", dir_okay=False),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log every file processed")]
DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks on failure")]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"lectern {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
    ] = False,
) -> None:
    """Lectern static site compiler."""


@app.command()
def build(
    config: ConfigOption = None,
    clean: Annotated[
        bool | None,
        typer.Option("--clean/--no-clean", help="Empty the target directory before writing"),
    ] = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
) -> None:
    """Compile the site and write it to the configured target."""
    configure_logging("DEBUG" if verbose else None)
    with handle_cli_errors(debug=debug):
        site_config = load_site_config(config)
        report = build_site(site_config, clean=clean)

    console.print(
        f"[bold green]Built {report.pages} page(s)[/bold green] from {report.posts} indexed post(s) "
        f"and {report.templates} template(s) into {site_config.target_dir}",
        highlight=False,
    )


@app.command()
def posts(
    config: ConfigOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
) -> None:
    """List indexed blog posts, newest first."""
    configure_logging("DEBUG" if verbose else "WARNING")
    with handle_cli_errors(debug=debug):
        site_config = load_site_config(config)
        index = index_posts(site_config.blog_dir)

    table = Table(title=f"Posts in {site_config.blog_dir}")
    table.add_column("Date", style="bold cyan")
    table.add_column("Id")
    table.add_column("Title")
    table.add_column("Link", style="green")
    for post in index:
        table.add_row(post.date, post.identifier, str(post.metadata.get("title", "")), post.link)

    console.print(table)
    if not len(index):
        console.print("[dim]No posts found.[/dim]")


if __name__ == "__main__":
    app()
