"""Typer CLI entry point for pomgen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pomgen.aggregator import aggregate
from pomgen.config import PomSettings
from pomgen.exceptions import PomGenError
from pomgen.generator import generate_pom
from pomgen.identity import resolve_identity
from pomgen.loader import load_build_graph
from pomgen.scopes import classify
from pomgen.visualize import build_scope_tree

app = typer.Typer(add_completion=False, help="Describe project dependencies as a pom.xml.")
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    if verbose:
        logging.getLogger("pomgen").setLevel(logging.DEBUG)


@app.command()
def generate(
    graph: Annotated[Path, typer.Argument(help="Path to the build graph JSON export.")],
    out: Annotated[
        Optional[Path],
        typer.Option("--out", help="Output pom.xml path (default: <project dir>/pom.xml)."),
    ] = None,
    group_id: Annotated[
        Optional[str], typer.Option("--group-id", help="Group ID if the project has none.")
    ] = None,
    artifact_id: Annotated[
        Optional[str], typer.Option("--artifact-id", help="Artifact ID if the project has none.")
    ] = None,
    version: Annotated[
        Optional[str], typer.Option("--version-override", help="Version if the project has none.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug output.")] = False,
) -> None:
    """Generate a pom.xml describing first-level dependencies of all projects."""
    _configure_logging(verbose)
    try:
        settings = PomSettings.from_env().with_options(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            output=out,
        )
        settings.validate()
        project = load_build_graph(graph)
        written = generate_pom(project, settings.overrides(), settings.output)
        console.print(f"[green]Wrote[/green] {written}")
    except (PomGenError, OSError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


@app.command()
def show(
    graph: Annotated[Path, typer.Argument(help="Path to the build graph JSON export.")],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug output.")] = False,
) -> None:
    """Print the dependencies that would be written, grouped by scope."""
    _configure_logging(verbose)
    try:
        settings = PomSettings.from_env()
        project = load_build_graph(graph)
        dependencies = aggregate(project)
        console.print(build_scope_tree(resolve_identity(project, settings.overrides()), dependencies))
    except PomGenError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


@app.command(name="classify")
def classify_names(
    names: Annotated[list[str], typer.Argument(help="Configuration names, e.g. testImplementation.")],
) -> None:
    """Show the Maven scope inferred for each configuration name."""
    table = Table(title="Configuration scopes")
    table.add_column("Configuration")
    table.add_column("Scope")
    for name in names:
        table.add_row(name, classify(name).value)
    console.print(table)


def main() -> None:
    """Console-script entry point."""
    app()
