import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graff._errors import GraphError
from graff._event_graph import EventGraph
from graff._graph import DirectedGraph
from graff._io import GraphDocument, GraphFileError, export_graph_to_toml, export_layers_to_toml, load_graph_document

from .config import ConfigError, get_config
from .render import render_edges, render_layers, render_order

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graff CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code=1)


def _load(path: Path) -> DirectedGraph[str] | EventGraph[str]:
    err_console.print(f"[cyan]Loading graph from:[/cyan] {path}")
    try:
        document = load_graph_document(path)
    except (GraphFileError, OSError) as e:
        raise _fail(str(e)) from e
    graph = document.build()
    err_console.print(
        f"[cyan]Graph:[/cyan] [bold]{graph.node_count()}[/bold] nodes, "
        f"[bold]{len(graph.edges())}[/bold] edges ({document.kind})",
    )
    return graph


@app.command()
def sort(
    path: Annotated[Path, typer.Argument(help="Path to graph TOML file")],
) -> None:
    """Print the nodes of a graph in topological order."""
    graph = _load(path)

    try:
        order = graph.dfs_sort()
    except GraphError as e:
        raise _fail(str(e)) from e

    render_order(order, out_console)


@app.command()
def reduce(
    path: Annotated[Path, typer.Argument(help="Path to graph TOML file")],
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to write the reduced graph to"),
    ] = None,
) -> None:
    """Remove every edge implied by a longer path."""
    graph = _load(path)
    edge_count = len(graph.edges())

    try:
        graph.remove_transitives()
    except GraphError as e:
        raise _fail(str(e)) from e

    removed = edge_count - len(graph.edges())
    err_console.print(f"[green]✓ Removed {removed} transitive edge(s)[/green]")

    if output is None:
        render_edges(GraphDocument.from_graph(graph).edges, out_console)
        return

    err_console.print(f"[cyan]Exporting reduced graph to:[/cyan] {output}")
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        export_graph_to_toml(graph, output)
    except OSError as e:
        raise _fail(f"Could not write {output}: {e}") from e


@app.command()
def layers(
    path: Annotated[Path, typer.Argument(help="Path to graph TOML file")],
    *,
    width: Annotated[
        int | None,
        typer.Option("-w", "--width", min=1, help="Maximum nodes per layer (default: [tool.graff].width or 2)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to write the layers to (default: [tool.graff].output)"),
    ] = None,
) -> None:
    """Sort the nodes of a graph into width-bounded Coffman-Graham layers."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e

    layer_width = config.resolve_width(width)
    logger.debug(f"Using layer width {layer_width}")

    graph = _load(path)

    try:
        result = graph.coffman_graham_sort(layer_width)
    except GraphError as e:
        raise _fail(str(e)) from e

    render_layers(result, layer_width, out_console)

    output_path = output if output is not None else config.output
    if output_path is not None:
        err_console.print(f"[cyan]Exporting layers to:[/cyan] {output_path}")
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            export_layers_to_toml(result, layer_width, output_path)
        except OSError as e:
            raise _fail(f"Could not write {output_path}: {e}") from e


def main() -> None:
    app()
