from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from arcpath._config import get_cli_settings
from arcpath.builder import PathBuilder
from arcpath.path import Path
from arcpath.validation import ValidationError

console = Console()
app = typer.Typer(help="Distribute points evenly by arc length along a polyline.")

DEMO_SAMPLES = (5, 15)


def _parse_point(raw: str) -> tuple[float, ...]:
    parts = [part.strip() for part in raw.split(",")]
    try:
        return tuple(float(part) for part in parts)
    except ValueError as exc:
        raise typer.BadParameter(f"Point {raw!r} must be comma-separated numbers, e.g. 1,2,3.") from exc


def _samples_table(points: np.ndarray, precision: int, title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    for axis in ("x", "y", "z", "w"):
        table.add_column(axis, justify="right")
    for idx, point in enumerate(points):
        table.add_row(str(idx), *(f"{float(value):.{precision}f}" for value in point))
    return table


def _print_samples(path: Path, counts: Sequence[int], precision: int) -> None:
    for count in counts:
        try:
            samples = path.evaluate(count)
        except ValidationError as exc:
            raise typer.BadParameter(str(exc)) from exc
        console.print(_samples_table(samples, precision, f"{count} samples"))


@app.command()
def demo(
    count: int = typer.Option(10, "--count", "-c", min=0, help="Number of staircase points (i, i, 0, 1)."),
    samples: Optional[List[int]] = typer.Option(
        None, "--samples", "-n", help="Sample count to evaluate; repeat for several. Defaults to 5 and 15."
    ),
) -> None:
    """
    Build the diagonal staircase path and print its length and even resamplings.
    """

    settings = get_cli_settings()
    builder = PathBuilder()
    for i in range(count):
        builder.add_point((float(i), float(i), 0.0, 1.0))
    path = builder.finalize()

    console.rule("arcpath demo")
    console.print(f"path.length() = [green]{path.length():.{settings.precision}f}[/green]")
    console.print(f"[cyan]{path!r}[/cyan]")
    _print_samples(path, samples or DEMO_SAMPLES, settings.precision)


@app.command()
def resample(
    point: List[str] = typer.Option(..., "--point", "-p", help="Point as x,y,z or x,y,z,w; repeat in path order."),
    param: Optional[List[float]] = typer.Option(
        None, "--param", help="Sort parameter per point; when given, points are ordered by it."
    ),
    samples: Optional[int] = typer.Option(None, "--samples", "-n", help="Number of output points."),
) -> None:
    """
    Resample the given polyline into evenly spaced points.
    """

    settings = get_cli_settings()
    if param and len(param) != len(point):
        raise typer.BadParameter(f"Got {len(param)} --param values for {len(point)} --point values.")

    builder = PathBuilder()
    try:
        if param:
            for raw, value in zip(point, param):
                builder.add_sorted_point(_parse_point(raw), value)
        else:
            for raw in point:
                builder.add_point(_parse_point(raw))
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    path = builder.finalize()

    count = samples if samples is not None else settings.default_samples
    mode = "parameter order" if param else "given order"
    console.print(
        Panel(
            f"{len(path)} points in {mode}, length [green]{path.length():.{settings.precision}f}[/green]",
            title="Path",
            border_style="green",
        )
    )
    _print_samples(path, [count], settings.precision)


__all__ = ["app"]
