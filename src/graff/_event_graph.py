"""Event graph recording "happened before" relations."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

from ._graph import CoffmanGrahamSorter, DirectedGraph, IncrementalCoffmanGrahamSorter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


T = TypeVar("T", bound=Hashable)


class EventGraph(Generic[T]):
    """A directed graph whose edge operations take their arguments reversed.

    ``add_edge(a, b)`` records that ``a`` happened before ``b`` and is stored in
    the wrapped graph as the edge ``b -> a``. Only the argument order is
    swapped; everything else is forwarded to the wrapped graph unchanged.
    """

    __slots__ = ("_graph",)

    def __init__(self, graph: DirectedGraph[T] | None = None) -> None:
        self._graph: DirectedGraph[T] = graph if graph is not None else DirectedGraph()

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        nodes: Iterable[T] = (),
    ) -> EventGraph[T]:
        """Build an event graph from ``(earlier, later)`` pairs."""
        graph: EventGraph[T] = cls()
        for node in nodes:
            graph.add_node(node)
        for earlier, later in edges:
            graph.add_edge(earlier, later)
        return graph

    @property
    def graph(self) -> DirectedGraph[T]:
        """The wrapped graph, holding every edge in stored (reversed) direction."""
        return self._graph

    def add_edge(self, earlier: T, later: T) -> None:
        """Record that ``earlier`` happened before ``later``."""
        self._graph.add_edge(later, earlier)

    def remove_edge(self, earlier: T, later: T) -> None:
        """Forget that ``earlier`` happened before ``later``; does nothing if unrecorded."""
        self._graph.remove_edge(later, earlier)

    def edge_exists(self, earlier: T, later: T) -> bool:
        """Check whether ``earlier`` is recorded as happening before ``later``."""
        return self._graph.edge_exists(later, earlier)

    def copy(self) -> EventGraph[T]:
        """Return a clone; mutating either graph never affects the other."""
        return EventGraph(self._graph.copy())

    def add_node(self, node: T) -> None:
        """Add an event without any relations."""
        self._graph.add_node(node)

    def nodes(self) -> list[T]:
        """All events in the graph."""
        return self._graph.nodes()

    def node_count(self) -> int:
        """Number of events in the graph."""
        return self._graph.node_count()

    def outgoing_edges(self, node: T) -> list[T]:
        """Events directly before ``node`` (stored successors)."""
        return self._graph.outgoing_edges(node)

    def incoming_edges(self, node: T) -> list[T]:
        """Events directly after ``node`` (stored predecessors)."""
        return self._graph.incoming_edges(node)

    def edges(self) -> list[tuple[T, T]]:
        """Stored edges of the wrapped graph, i.e. ``(later, earlier)`` pairs."""
        return self._graph.edges()

    def remove_transitives(self) -> None:
        """Remove every relation implied by a longer chain of events."""
        self._graph.remove_transitives()

    def dfs_sort(self) -> list[T]:
        """Topological order of the stored edges: later events come first."""
        return self._graph.dfs_sort()

    def coffman_graham_sorter(
        self,
        width: int,
        *,
        incremental: bool = True,
    ) -> CoffmanGrahamSorter[T]:
        """Return a layering sorter over the stored edges.

        The sorter is incremental by default so that events added later are
        merged into layers that have already been displayed.
        """
        if incremental:
            return IncrementalCoffmanGrahamSorter(self._graph, width)
        return CoffmanGrahamSorter(self._graph, width)

    def coffman_graham_sort(self, width: int) -> list[list[T]]:
        """Sort the events into layers of at most ``width``, latest first."""
        return self._graph.coffman_graham_sort(width)

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return len(self._graph)

    def __iter__(self) -> Iterator[T]:
        return iter(self._graph)

    def __repr__(self) -> str:
        return f"EventGraph(nodes={self._graph.node_count()}, edges={self._graph.edge_count()})"
