"""Depth-first topological sorting and transitive reduction."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

from graff._errors import CyclicGraphError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._directed_graph import DirectedGraph

logger = logging.getLogger(__name__)

# Marks an exhausted successor iterator; nodes may be any hashable, None included.
_EXHAUSTED = object()


T = TypeVar("T", bound=Hashable)


class DFSSorter(Generic[T]):
    """Topologically sort a directed graph using depth-first search.

    Each node is unvisited, visiting (on the traversal stack) or discovered
    (fully processed). Reaching a visiting node again means the traversal
    followed a back-edge, so the graph is cyclic.

    The traversal uses an explicit stack of ``(node, successors)`` frames, so
    the depth of the graph is not limited by the interpreter's recursion limit.
    Nodes are emitted in post-order and the result is reversed at the end.

    See https://en.wikipedia.org/wiki/Topological_sorting#Depth-first_search
    """

    def __init__(self, graph: DirectedGraph[T]) -> None:
        self.graph = graph
        self._sorted: list[T] = []
        self._visiting: set[T] = set()
        self._discovered: set[T] = set()

    def _reset(self) -> None:
        self._sorted = []
        self._visiting = set()
        self._discovered = set()

    def sort(self) -> list[T]:
        """Return the graph's nodes in topological order.

        Returns:
            Every node exactly once, each edge's source before its target.

        Raises:
            CyclicGraphError: If a cycle is reachable from any node.

        """
        self._reset()

        for node in self.graph.nodes():
            self._visit(node)

        # post-order emission is the reverse of topological order
        self._sorted.reverse()
        return self._sorted

    def _visit(self, root: T) -> None:
        if root in self._discovered:
            return

        self._visiting.add(root)
        stack: list[tuple[T, Iterator[T]]] = [(root, iter(self.graph.outgoing_edges(root)))]

        while stack:
            node, successors = stack[-1]
            successor = next(successors, _EXHAUSTED)

            if successor is _EXHAUSTED:
                stack.pop()
                self._visiting.discard(node)
                self._discovered.add(node)
                self._sorted.append(node)
                continue

            if successor in self._discovered:
                continue
            if successor in self._visiting:
                cycle = _cycle_ending_at(stack, successor)
                logger.debug(f"Cycle detected: {cycle}")
                raise CyclicGraphError(cycle)

            self._visiting.add(successor)
            stack.append((successor, iter(self.graph.outgoing_edges(successor))))


def _cycle_ending_at(stack: list[tuple[T, Iterator[T]]], node: T) -> list[T]:
    """Extract the cycle closed by a back-edge to ``node`` from the traversal stack."""
    path = [frame_node for frame_node, _ in stack]
    return [*path[path.index(node) :], node]


def remove_transitives(graph: DirectedGraph[T]) -> None:
    """Remove every edge of ``graph`` that is implied by a longer path.

    An edge ``u -> v`` is dropped when ``v`` is reachable from another direct
    successor ``w`` of ``u``. Reachability between all pairs of nodes is
    unchanged, and applying the reduction twice gives the same edges as
    applying it once.

    Args:
        graph: The graph to reduce in place.

    Raises:
        CyclicGraphError: If the graph contains a cycle.

    """
    order = graph.dfs_sort()

    # Successors come later in topological order, so walking it backwards
    # completes every successor's reachable set before it is needed.
    reachable: dict[T, set[T]] = {}
    for node in reversed(order):
        reach: set[T] = set()
        for successor in graph.outgoing_edges(node):
            reach.add(successor)
            reach |= reachable[successor]
        reachable[node] = reach

    removed = 0
    for node in order:
        successors = graph.outgoing_edges(node)
        for target in successors:
            if any(target in reachable[other] for other in successors if other != target):
                graph.remove_edge(node, target)
                removed += 1

    logger.debug(f"Removed {removed} transitive edge(s) from {graph!r}")
