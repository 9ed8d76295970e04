"""Loading and exporting graph documents as TOML."""

from __future__ import annotations

import logging
import tomllib
from enum import StrEnum, auto
from pathlib import Path

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError

from ._event_graph import EventGraph
from ._graph import DirectedGraph

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error in a graph document."""


class GraphKind(StrEnum):
    """How the edges of a graph document are interpreted."""

    DIRECTED = auto()  # [a, b] is the edge a -> b
    EVENT = auto()  # [a, b] means a happened before b, stored as b -> a


class GraphDocument(BaseModel):
    """A graph as written in a TOML document.

    Example:
        kind = "directed"
        nodes = ["D"]
        edges = [["A", "B"], ["B", "C"]]

    """

    model_config = ConfigDict(extra="forbid")

    kind: GraphKind = GraphKind.DIRECTED
    nodes: list[str] = []
    edges: list[tuple[str, str]] = []

    def build(self) -> DirectedGraph[str] | EventGraph[str]:
        """Build the graph described by this document."""
        if self.kind is GraphKind.EVENT:
            return EventGraph.from_edges(self.edges, nodes=self.nodes)
        return DirectedGraph.from_edges(self.edges, nodes=self.nodes)

    @classmethod
    def from_graph(cls, graph: DirectedGraph[str] | EventGraph[str]) -> GraphDocument:
        """Describe an existing graph, keeping the edge convention of its type."""
        if isinstance(graph, EventGraph):
            edges = [(earlier, later) for later, earlier in graph.edges()]
            return cls(kind=GraphKind.EVENT, nodes=graph.nodes(), edges=edges)
        return cls(kind=GraphKind.DIRECTED, nodes=graph.nodes(), edges=graph.edges())


def load_graph_document(input_path: Path) -> GraphDocument:
    """Load and validate a graph document from a TOML file.

    Args:
        input_path: Path to the TOML file.

    Returns:
        The validated GraphDocument.

    Raises:
        GraphFileError: If the file is not valid TOML or does not describe a graph.

    """
    with input_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {input_path}: {e}"
            raise GraphFileError(msg) from e

    try:
        document = GraphDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph document {input_path}: {e}"
        raise GraphFileError(msg) from e

    logger.debug(f"Loaded {len(document.edges)} edge(s) from {input_path}")
    return document


def export_graph_to_toml(graph: DirectedGraph[str] | EventGraph[str], output_path: Path) -> None:
    """Write a graph to a TOML document readable by ``load_graph_document``."""
    document = GraphDocument.from_graph(graph)
    with output_path.open("wb") as f:
        tomli_w.dump(document.model_dump(mode="json"), f)
    logger.debug(f"Exported graph to {output_path}")


def export_layers_to_toml(layers: list[list[str]], width: int, output_path: Path) -> None:
    """Write a layering to a TOML document.

    Example output:
        width = 2
        layers = [["A", "D"], ["B"], ["C"]]

    """
    with output_path.open("wb") as f:
        tomli_w.dump({"width": width, "layers": layers}, f)
    logger.debug(f"Exported {len(layers)} layer(s) to {output_path}")
