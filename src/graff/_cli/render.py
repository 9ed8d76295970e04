"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console


def render_order(order: list[str], console: Console) -> None:
    """Render a topological order as a numbered table.

    Args:
        order: Nodes in topological order.
        console: Rich Console to output to.

    """
    if not order:
        console.print("[dim]The graph has no nodes[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="bold")

    for position, node in enumerate(order):
        table.add_row(str(position), escape(node))

    console.print(table)


def render_layers(layers: list[list[str]], width: int, console: Console) -> None:
    """Render a layering as a table with one row per layer.

    Args:
        layers: Layers as returned by a Coffman-Graham sorter.
        width: The maximum layer width the layering was computed with.
        console: Rich Console to output to.

    """
    if not layers:
        console.print("[dim]The graph has no nodes[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Layer", justify="right", style="dim")
    table.add_column("Nodes")
    table.add_column("Size", justify="right")

    for index, layer in enumerate(layers):
        size_style = "yellow" if len(layer) == width else "green"
        table.add_row(
            str(index),
            ", ".join(escape(node) for node in layer),
            f"[{size_style}]{len(layer)}/{width}[/{size_style}]",
        )

    console.print(table)
    console.print(f"\n[dim]Total: {sum(len(layer) for layer in layers)} nodes in {len(layers)} layers[/dim]")


def render_edges(edges: list[tuple[str, str]], console: Console) -> None:
    """Render edges as ``source -> target`` lines."""
    if not edges:
        console.print("[dim]No edges[/dim]")
        return
    for source, target in edges:
        console.print(f"{escape(source)} [dim]->[/dim] {escape(target)}")
