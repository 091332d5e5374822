"""Family Graph CLI - Main entry point.

This module provides the command-line interface for building family trees from
entity draft JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from family_graph.config import settings
from family_graph.graph import (
    LAYOUTS,
    FamilyTree,
    GenerationCycleError,
    build_family_tree,
    build_relation_view,
)
from family_graph.schemas import EntityDraft, merge_drafts

app = typer.Typer(
    name="familygraph",
    help="Family Graph - Build positioned family trees from extracted entities",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level="DEBUG" if verbose else settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def load_drafts(paths: list[Path]) -> EntityDraft:
    """Read and merge entity draft JSON files.

    Args:
        paths: Draft files, merged in the given order

    Returns:
        A single merged EntityDraft
    """
    drafts = []
    for path in paths:
        with open(path, encoding="utf-8") as f:
            drafts.append(EntityDraft.model_validate(json.load(f)))
    return merge_drafts(drafts)


def emit(payload: dict[str, Any], output: Path | None) -> None:
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]Wrote {output}[/green]")
    else:
        console.print_json(text)


def print_members(tree: FamilyTree) -> None:
    table = Table(show_header=True, header_style="bold cyan", title="Members")
    table.add_column("Id", style="dim")
    table.add_column("Name")
    table.add_column("Gen", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Gender")
    table.add_column("Born", justify="right")
    table.add_column("Spouse")

    for member in tree.members:
        table.add_row(
            member.id,
            member.name,
            str(member.generation),
            f"{member.x:.1f}",
            f"{member.y:.1f}",
            member.gender,
            str(member.birth_year or ""),
            member.spouse or "",
        )

    console.print(table)
    console.print(
        f"[dim]{tree.total_members} members, {len(tree.connections)} connections, "
        f"{tree.generations} generations[/dim]"
    )


@app.command()
def build(
    paths: list[Path] = typer.Argument(
        ..., help="Entity draft JSON files (several are merged)", exists=True, dir_okay=False
    ),
    layout: str = typer.Option("grid", "--layout", "-l", help="Layout: grid or radial"),
    center: str | None = typer.Option(
        None, "--center", "-c", help="Center member for the radial layout"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON to a file"),
    table: bool = typer.Option(False, "--table", help="Print a members table instead of JSON"),
) -> None:
    """Build a family tree payload from entity drafts."""
    if layout not in LAYOUTS:
        console.print(f"[red]Unknown layout {layout!r}. Use one of: {', '.join(LAYOUTS)}[/red]")
        raise typer.Exit(1)

    try:
        tree = build_family_tree(load_drafts(paths), layout=layout, center=center)
    except json.JSONDecodeError as e:
        console.print(f"[red]Draft file is not valid JSON:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid entity draft:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except GenerationCycleError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if table:
        print_members(tree)
    else:
        emit(tree.to_dict(), output)


@app.command()
def relations(
    paths: list[Path] = typer.Argument(
        ..., help="Entity draft JSON files (several are merged)", exists=True, dir_okay=False
    ),
    center: str | None = typer.Option(
        None, "--center", "-c", help="Center member (default: the writer)"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON to a file"),
) -> None:
    """Build the radial "relations around me" view."""
    try:
        view = build_relation_view(load_drafts(paths), center=center)
    except json.JSONDecodeError as e:
        console.print(f"[red]Draft file is not valid JSON:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid entity draft:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except GenerationCycleError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    emit(view, output)


@app.command()
def version() -> None:
    """Display version information."""
    from family_graph import __version__

    console.print(f"\n[bold cyan]Family Graph[/bold cyan] version {__version__}\n")


if __name__ == "__main__":
    app()
