"""Directed graph composed of a node set and an edge index."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

from graff._errors import CyclicGraphError

from ._algorithms import DFSSorter, remove_transitives
from ._edge_index import EdgeIndex
from ._layering import CoffmanGrahamSorter, IncrementalCoffmanGrahamSorter
from ._node_set import Graph

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


T = TypeVar("T", bound=Hashable)


class DirectedGraph(Generic[T]):
    """A graph of nodes connected by directed edges.

    Every endpoint of an edge is a member of the node set: ``add_edge`` adds
    missing nodes implicitly, while ``remove_edge`` leaves the nodes in place.
    Self-loops are stored like any other edge and adding an edge twice has no
    further effect.

    Example:
        >>> graph = DirectedGraph.from_edges([("a", "b"), ("b", "c"), ("a", "c")])
        >>> graph.remove_transitives()
        >>> graph.edge_exists("a", "c")
        False
        >>> graph.dfs_sort()
        ['a', 'b', 'c']

    """

    __slots__ = ("_edges", "_graph")

    def __init__(self) -> None:
        self._graph: Graph[T] = Graph()
        self._edges: EdgeIndex[T] = EdgeIndex()

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        nodes: Iterable[T] = (),
    ) -> DirectedGraph[T]:
        """Build a graph from ``(source, target)`` pairs and optional isolated nodes.

        Args:
            edges: Directed edges to add.
            nodes: Extra nodes to add before the edges, e.g. nodes without edges.

        Returns:
            A new DirectedGraph instance.

        """
        graph: DirectedGraph[T] = cls()
        for node in nodes:
            graph.add_node(node)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    # -- nodes ---------------------------------------------------------------

    def add_node(self, node: T) -> None:
        """Add a node without any edges."""
        self._graph.add(node)

    def nodes(self) -> list[T]:
        """All nodes in the graph."""
        return self._graph.nodes()

    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return len(self._graph)

    # -- edges ---------------------------------------------------------------

    def add_edge(self, source: T, target: T) -> None:
        """Add the edge ``source -> target``, adding either node if absent."""
        self._graph.add(source)
        self._graph.add(target)
        self._edges.add(source, target)

    def remove_edge(self, source: T, target: T) -> None:
        """Remove the edge ``source -> target``; does nothing if it is absent."""
        self._edges.remove(source, target)

    def edge_exists(self, source: T, target: T) -> bool:
        """Check whether the edge ``source -> target`` exists."""
        return self._edges.exists(source, target)

    def outgoing_edges(self, node: T) -> list[T]:
        """Direct successors of ``node``; empty if it has none or is unknown."""
        return self._edges.outgoing(node)

    def incoming_edges(self, node: T) -> list[T]:
        """Direct predecessors of ``node``; empty if it has none or is unknown."""
        return self._edges.incoming(node)

    def edges(self) -> list[tuple[T, T]]:
        """All edges as ``(source, target)`` pairs."""
        return self._edges.edges()

    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return len(self._edges)

    # -- derived graphs ------------------------------------------------------

    def copy(self) -> DirectedGraph[T]:
        """Return a clone; mutating either graph never affects the other."""
        clone: DirectedGraph[T] = DirectedGraph()
        clone._graph = self._graph.copy()  # noqa: SLF001
        clone._edges = self._edges.copy()  # noqa: SLF001
        return clone

    def reversed(self) -> DirectedGraph[T]:
        """Return a copy with the direction of every edge flipped."""
        transposed: DirectedGraph[T] = DirectedGraph()
        for node in self._graph:
            transposed.add_node(node)
        for source, target in self._edges.edges():
            transposed.add_edge(target, source)
        return transposed

    # -- reachability --------------------------------------------------------

    def descendants(self, node: T) -> frozenset[T]:
        """All nodes reachable from ``node`` through one or more edges."""
        visited: set[T] = set()
        stack = self.outgoing_edges(node)
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self.outgoing_edges(current))
        return frozenset(visited)

    def ancestors(self, node: T) -> frozenset[T]:
        """All nodes from which ``node`` is reachable through one or more edges."""
        visited: set[T] = set()
        stack = self.incoming_edges(node)
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self.incoming_edges(current))
        return frozenset(visited)

    # -- algorithms ----------------------------------------------------------

    def remove_transitives(self) -> None:
        """Remove, in place, every edge implied by a longer path.

        Raises:
            CyclicGraphError: If the graph contains a cycle.

        """
        remove_transitives(self)

    def dfs_sort(self) -> list[T]:
        """Return the nodes in topological order using depth-first search.

        Raises:
            CyclicGraphError: If the graph contains a cycle.

        """
        return DFSSorter(self).sort()

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        try:
            self.dfs_sort()
        except CyclicGraphError:
            return True
        return False

    def coffman_graham_sorter(
        self,
        width: int,
        *,
        incremental: bool = False,
    ) -> CoffmanGrahamSorter[T]:
        """Return a layering sorter bound to this graph.

        Args:
            width: Maximum number of nodes per layer.
            incremental: Keep layer assignments across repeated ``sort()`` calls.

        """
        if incremental:
            return IncrementalCoffmanGrahamSorter(self, width)
        return CoffmanGrahamSorter(self, width)

    def coffman_graham_sort(self, width: int) -> list[list[T]]:
        """Sort the nodes into layers of at most ``width`` nodes.

        A node always lands in a later layer than each of its predecessors.

        Raises:
            CyclicGraphError: If the graph contains a cycle.

        """
        return CoffmanGrahamSorter(self, width).sort()

    # -- dunder --------------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return len(self._graph)

    def __iter__(self) -> Iterator[T]:
        return iter(self._graph)

    def __repr__(self) -> str:
        return f"DirectedGraph(nodes={self.node_count()}, edges={self.edge_count()})"
