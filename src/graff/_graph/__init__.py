"""Graph module providing directed graphs and ordering algorithms.

This module contains:
- DirectedGraph[T]: A mutable directed graph over hashable nodes
- DFSSorter: Depth-first topological sorting with cycle detection
- CoffmanGrahamSorter: Width-bounded layering, one-shot or incremental
"""

from ._algorithms import DFSSorter, remove_transitives
from ._directed_graph import DirectedGraph
from ._edge_index import EdgeIndex
from ._layering import CoffmanGrahamSorter, IncrementalCoffmanGrahamSorter, Orientation
from ._node_set import Graph

__all__ = [
    "CoffmanGrahamSorter",
    "DFSSorter",
    "DirectedGraph",
    "EdgeIndex",
    "Graph",
    "IncrementalCoffmanGrahamSorter",
    "Orientation",
    "remove_transitives",
]
