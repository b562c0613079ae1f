"""Command Line Interface for Floor Rooms.

This module provides a simple CLI for detecting the rooms of a floor plan,
checking plan consistency and rendering plan images.
"""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import FLOOR_DEPTH
from .core.errors import InvalidPlan
from .engine.api import create_floor_model
from .engine.validators import validate_all
from .io.parser import load_plan, save_plan
from .visualization.generator import generate_plan_image

app = typer.Typer(
    name="floor-rooms",
    help="A CLI tool for floor plan room detection",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Detect rooms in wall-based floor plans."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def rooms(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floor plan JSON file"),
    depth: float = typer.Option(FLOOR_DEPTH, "--depth", help="Floor slab extrusion depth"),
    write: bool = typer.Option(False, "--write", "-w", help="Save the reconciled rooms back to the plan"),
    output: Path = typer.Option(None, "--out", help="Write the reconciled plan to this path instead"),
):
    """Detect the rooms of a plan and reconcile them with the persisted ones."""
    try:
        plan_obj = load_plan(str(plan))
        console.print(f"[green]✓[/green] Loaded plan from {plan}")

        floor, _ = create_floor_model(plan_obj, depth)

        table = Table(title=f"{len(plan_obj.rooms)} rooms")
        table.add_column("Room", style="cyan")
        table.add_column("Center (x, z)", justify="right")
        table.add_column("Corners", justify="right")
        table.add_column("Area", justify="right")
        table.add_column("Texture")

        meshes = {mesh.uuid: mesh for mesh in floor}
        for room in plan_obj.rooms:
            mesh = meshes.get(room.mesh)
            corners = len(mesh.geometry.exterior.coords) - 1 if mesh is not None else 0
            area = mesh.geometry.area if mesh is not None else 0.0
            table.add_row(
                room.id[:8],
                f"{room.center.x:.3f}, {room.center.y:.3f}",
                str(corners),
                f"{area:.2f} m²",
                room.texture,
            )
        console.print(table)

        target = output or (plan if write else None)
        if target is not None:
            save_plan(plan_obj, str(target))
            console.print(f"[green]✓[/green] Plan saved to {target}")

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {e}[/red]")
        raise typer.Exit(1)
    except (InvalidPlan, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def check(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floor plan JSON file"),
):
    """Check that every wall endpoint resolves to exactly one point."""
    try:
        plan_obj = load_plan(str(plan))
        validate_all(plan_obj)
        console.print(
            f"[green]✓[/green] Plan is consistent: {len(plan_obj.points)} points, "
            f"{len(plan_obj.walls)} walls"
        )
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {e}[/red]")
        raise typer.Exit(1)
    except (InvalidPlan, ValueError) as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)


@app.command()
def render(
    plan: Path = typer.Option(..., "--plan", "-p", help="Path to floor plan JSON file"),
    output: Path = typer.Option(..., "--out", help="Path to output PNG file"),
    labels: bool = typer.Option(True, "--labels/--no-labels", help="Draw wall length labels"),
):
    """Render a top-down image of the plan and its rooms."""
    try:
        plan_obj = load_plan(str(plan))
        floor, centers = create_floor_model(plan_obj)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (InvalidPlan, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not generate_plan_image(plan_obj, floor, centers, output, labels=labels):
        console.print("[red]✗[/red] Image generation failed")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Image saved to {output}")


if __name__ == "__main__":
    app()
