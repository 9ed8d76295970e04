"""Unordered node set underlying every graph."""

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """A set of nodes.

    Nodes are pure keys: the graph stores no payload for them. Iteration
    follows insertion order so that traversals are reproducible, but that order
    has no meaning beyond determinism.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        # dict used as an insertion-ordered set
        self._nodes: dict[T, None] = {}

    def add(self, node: T) -> None:
        """Add a node. Adding an existing node has no effect."""
        self._nodes[node] = None

    def discard(self, node: T) -> None:
        """Remove a node if present."""
        self._nodes.pop(node, None)

    def nodes(self) -> list[T]:
        """Return all nodes."""
        return list(self._nodes)

    def copy(self) -> "Graph[T]":
        """Return a clone sharing no storage with this graph."""
        clone: Graph[T] = Graph()
        clone._nodes = dict(self._nodes)  # noqa: SLF001
        return clone

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph({list(self._nodes)!r})"
