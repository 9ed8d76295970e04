"""Coffman-Graham layering bounded by a maximum layer width.

See https://en.wikipedia.org/wiki/Coffman%E2%80%93Graham_algorithm
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Generic, TypeVar

from graff._errors import DependencyOrderError

if TYPE_CHECKING:
    from ._directed_graph import DirectedGraph

logger = logging.getLogger(__name__)


T = TypeVar("T", bound=Hashable)


class Orientation(StrEnum):
    """Which direction of the graph's edges the layering follows."""

    FORWARD = auto()  # an edge u -> v puts u in an earlier layer than v
    REVERSED = auto()  # an edge u -> v puts v in an earlier layer than u


class CoffmanGrahamSorter(Generic[T]):
    """Sort a graph's nodes into a sequence of width-bounded layers.

    Every node is placed in a later layer than each of its predecessors, and
    no layer holds more than ``width`` nodes. Before layering, a copy of the
    graph is transitively reduced and sorted depth-first; nodes are then
    placed in that order into the first layer after their latest
    predecessor that still has room, or into a new layer at the end.

    The layer list and level map belong to this instance. A one-shot sorter
    starts over on every ``sort()`` call; ``IncrementalCoffmanGrahamSorter``
    keeps them instead.

    Attributes:
        graph: The graph being layered. It is never modified.
        width: Maximum number of nodes per layer.
        orientation: Whether edges point towards later or earlier layers.

    """

    persist: bool = False

    def __init__(
        self,
        graph: DirectedGraph[T],
        width: int,
        *,
        orientation: Orientation = Orientation.FORWARD,
    ) -> None:
        if width < 1:
            msg = f"Layer width must be a positive integer, got {width}"
            raise ValueError(msg)
        self.graph = graph
        self.width = width
        self.orientation = Orientation(orientation)
        self._layers: list[list[T]] = []
        self._levels: dict[T, int] = {}

    @property
    def levels(self) -> dict[T, int]:
        """Layer index of every node placed so far."""
        return dict(self._levels)

    @property
    def max_level(self) -> int:
        """Index of the last layer, or ``-1`` if nothing has been placed."""
        return len(self._layers) - 1

    def level_of(self, node: T) -> int | None:
        """Layer index of ``node``, or None if it has not been placed."""
        return self._levels.get(node)

    def _reduced_graph(self) -> DirectedGraph[T]:
        if self.orientation is Orientation.REVERSED:
            reduced = self.graph.reversed()
        else:
            reduced = self.graph.copy()
        reduced.remove_transitives()
        return reduced

    def sort(self) -> list[list[T]]:
        """Return the layers, first layer first.

        Returns:
            A list of layers, each a list of nodes in placement order.

        Raises:
            CyclicGraphError: If the graph contains a cycle.
            DependencyOrderError: If a node is reached before one of its
                predecessors has been placed.

        """
        if not self.persist:
            self._layers = []
            self._levels = {}

        reduced = self._reduced_graph()
        nodes = reduced.dfs_sort()

        layers = self._layers
        levels = self._levels

        for node in nodes:
            if node in levels:
                # placements are never revised
                continue

            dependant_level = -1
            for dependant in reduced.incoming_edges(node):
                if dependant not in levels:
                    raise DependencyOrderError(node, dependant)
                dependant_level = max(dependant_level, levels[dependant])

            level = self._first_open_layer(dependant_level)
            if level == -1:
                layers.append([])
                level = len(layers) - 1
                logger.debug(f"Allocated layer {level} for {node!r}")

            layers[level].append(node)
            levels[node] = level
            logger.debug(f"Placed {node!r} in layer {level} (after layer {dependant_level})")

        return [list(layer) for layer in layers]

    def _first_open_layer(self, dependant_level: int) -> int:
        """First layer after ``dependant_level`` with room left, or ``-1``."""
        for index in range(dependant_level + 1, len(self._layers)):
            if len(self._layers[index]) < self.width:
                return index
        return -1


class IncrementalCoffmanGrahamSorter(CoffmanGrahamSorter[T]):
    """A Coffman-Graham sorter that keeps its layering between calls.

    Nodes placed by an earlier ``sort()`` keep their layer for the lifetime of
    the sorter, even when edges added since would suggest another placement.
    Only nodes added to the graph since the previous call are placed, so a new
    node can be merged into a layering that has already been displayed.

    Example:
        >>> graph = DirectedGraph.from_edges([("a", "b")])
        >>> sorter = IncrementalCoffmanGrahamSorter(graph, width=2)
        >>> sorter.sort()
        [['a'], ['b']]
        >>> graph.add_edge("a", "c")
        >>> sorter.sort()
        [['a'], ['b', 'c']]

    """

    persist = True
