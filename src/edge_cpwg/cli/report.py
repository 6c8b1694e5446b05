"""Rendering of a CoupledCPWGResult for the command line."""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rich.console import Console

    from edge_cpwg.physics import CoupledCPWGResult

__all__ = ["format_value", "render_text", "render_json", "render_table"]

LABEL_WIDTH = 7

UNITS = {
    "Er_even": "",
    "Er_odd": "",
    "Zeven": "Ω",
    "Zodd": "Ω",
    "Z0": "Ω",
    "Zdiff": "Ω",
    "Zcomm": "Ω",
}


def format_value(value: float, precision: int = 6) -> str:
    """Format like printf %g: ``precision`` significant digits, nan/inf spelled out."""
    return f"{value:.{precision}g}"


def render_text(result: CoupledCPWGResult, precision: int = 6) -> str:
    """The seven-line ``label = value`` report."""
    return "\n".join(
        f"{label:<{LABEL_WIDTH}} = {format_value(value, precision)}"
        for label, value in result.outputs().items()
    )


def _finite_or_none(data: Any) -> Any:
    """Replace NaN/inf (not valid JSON) with None, recursively."""
    if isinstance(data, dict):
        return {key: _finite_or_none(value) for key, value in data.items()}
    if isinstance(data, float) and not math.isfinite(data):
        return None
    return data


def render_json(result: CoupledCPWGResult) -> str:
    """JSON document with inputs, the seven outputs and derived quantities."""
    data: dict[str, Any] = {}
    if result.parameters is not None:
        data["inputs"] = result.parameters.as_dict()
    data["results"] = result.outputs()
    data["derived"] = {
        "coupling_coefficient": result.coupling_coefficient,
        "phase_velocity_even_m_per_s": result.phase_velocity_even,
        "phase_velocity_odd_m_per_s": result.phase_velocity_odd,
    }
    details = result.as_dict()
    for key in ("geometry", "moduli"):
        if key in details:
            data[key] = details[key]
    data["finite"] = result.is_finite
    return json.dumps(_finite_or_none(data), indent=2)


def render_table(result: CoupledCPWGResult, console: Console, precision: int = 6) -> None:
    """Print the result as a rich table."""
    from rich.table import Table

    if result.parameters is not None:
        p = result.parameters
        console.print(
            f"\n[bold]Edge-coupled CPWG:[/bold] d={p.pair_gap:g} S={p.strip_width:g} "
            f"W={p.ground_gap:g} t={p.thickness:g} h={p.substrate_height:g} εr={p.epsilon_r:g}\n"
        )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Unit")

    for label, value in result.outputs().items():
        text = format_value(value, precision)
        if not math.isfinite(value):
            text = f"[red]{text}[/red]"
        table.add_row(label, text, UNITS[label])

    console.print(table)

    if not result.is_finite:
        console.print("[yellow]Non-finite results: geometry is outside the model's domain[/yellow]")
    else:
        console.print(f"Coupling k = {result.coupling_coefficient:.3f}")
