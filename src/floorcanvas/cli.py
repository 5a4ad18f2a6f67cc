"""Command Line Interface for Floor Canvas.

This module provides a simple CLI for validating floor plan documents,
rendering them to PNG images and printing their summary badges.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import config
from .core.errors import MalformedDocumentError
from .io.parser import NormalizationReport, document_to_dict, load_document
from .visualization.generator import ViewParams, generate_floor_plan_image
from .visualization.summary import summarize

app = typer.Typer(
    name="floorcanvas",
    help="A CLI tool for validating and rendering AI-generated floor plans",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(plan: Path, verbose: bool) -> NormalizationReport:
    """Load a plan, converting failures into a CLI exit."""
    try:
        report = load_document(plan)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {e}[/red]")
        raise typer.Exit(1)
    except MalformedDocumentError as e:
        console.print(f"[red]Could not display floor plan: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Loaded floor plan from {plan}")
    if report.dropped:
        console.print(
            f"[yellow]![/yellow] Dropped {len(report.dropped)} malformed "
            f"{'entry' if len(report.dropped) == 1 else 'entries'}"
        )
    if verbose:
        document = report.document
        console.print(
            f"  rooms={len(document.rooms)} hallways={len(document.hallways)} "
            f"walls={len(document.walls)} doors={len(document.doors)} "
            f"windows={len(document.windows)}"
        )
    return report


@app.command()
def render(
    plan: Optional[Path] = typer.Option(
        None, "--plan", "-p", help="Path to floor plan JSON file (omit for an empty canvas)"
    ),
    output: Path = typer.Option(..., "--out", "-o", help="Path to output PNG file"),
    grid: bool = typer.Option(True, "--grid/--no-grid", help="Draw the background grid"),
    zoom: int = typer.Option(
        config.ZOOM_DEFAULT, "--zoom", "-z",
        help=f"Zoom percentage ({config.ZOOM_MIN}-{config.ZOOM_MAX})",
    ),
    width: int = typer.Option(config.CANVAS_WIDTH, "--width", help="Canvas width in pixels"),
    height: int = typer.Option(config.CANVAS_HEIGHT, "--height", help="Canvas height in pixels"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Render a floor plan to a PNG image."""
    _configure_logging(verbose)

    if width <= 0 or height <= 0:
        console.print(f"[red]Error: Canvas size must be positive, got {width}x{height}[/red]")
        raise typer.Exit(1)
    view = ViewParams(
        grid_visible=grid,
        zoom_percent=zoom,
        canvas_width_px=width,
        canvas_height_px=height,
    )

    document = _load(plan, verbose).document if plan is not None else None
    generate_floor_plan_image(document, output, view)

    if document is None:
        console.print(f"[green]✓[/green] Empty canvas saved to {output}")
    else:
        console.print(f"[green]✓[/green] Floor plan saved to {output}")
        for badge in summarize(document).badges():
            console.print(f"  [blue]•[/blue] {badge}")


@app.command()
def validate(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floor plan JSON file"),
    output: Optional[Path] = typer.Option(
        None, "--out", "-o", help="Write the normalized document to this JSON file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Validate a floor plan and report the entries that were dropped."""
    _configure_logging(verbose)
    report = _load(plan, verbose)

    if report.dropped:
        table = Table(title="Dropped entries")
        table.add_column("Collection", style="cyan")
        table.add_column("Index", justify="right")
        table.add_column("Reason")
        for entry in report.dropped:
            table.add_row(entry.collection, str(entry.index), entry.reason)
        console.print(table)
    else:
        console.print("[bold green]✓ No entries dropped[/bold green]")

    if output is not None:
        try:
            text = json.dumps(document_to_dict(report.document), indent=2, allow_nan=False)
        except ValueError:
            console.print(
                "[red]Error: Normalized floor plan contains non-finite numbers "
                "and cannot be written as JSON[/red]"
            )
            raise typer.Exit(1)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        console.print(f"[green]✓[/green] Normalized floor plan saved to {output}")


@app.command()
def summary(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floor plan JSON file"),
):
    """Print the summary badges of a floor plan."""
    report = _load(plan, verbose=False)
    plan_summary = summarize(report.document)

    table = Table()
    table.add_column("Badge", style="cyan")
    for badge in plan_summary.badges():
        table.add_row(badge)
    console.print(table)


if __name__ == "__main__":
    app()
