"""Directed graphs with topological sorting and width-bounded layering."""

__all__ = [
    "CoffmanGrahamSorter",
    "CyclicGraphError",
    "DFSSorter",
    "DependencyOrderError",
    "DirectedGraph",
    "EdgeIndex",
    "EventGraph",
    "Graph",
    "GraphDocument",
    "GraphError",
    "GraphFileError",
    "GraphKind",
    "IncrementalCoffmanGrahamSorter",
    "Orientation",
    "export_graph_to_toml",
    "export_layers_to_toml",
    "load_graph_document",
    "remove_transitives",
]

from ._errors import CyclicGraphError, DependencyOrderError, GraphError
from ._event_graph import EventGraph
from ._graph import (
    CoffmanGrahamSorter,
    DFSSorter,
    DirectedGraph,
    EdgeIndex,
    Graph,
    IncrementalCoffmanGrahamSorter,
    Orientation,
    remove_transitives,
)
from ._io import (
    GraphDocument,
    GraphFileError,
    GraphKind,
    export_graph_to_toml,
    export_layers_to_toml,
    load_graph_document,
)
