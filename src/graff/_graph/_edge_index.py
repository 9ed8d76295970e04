"""Bidirectional adjacency index over ordered node pairs."""

from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class EdgeIndex(Generic[T]):
    """Index of directed edges with constant-time lookup in both directions.

    ``outgoing(u)`` lists every ``v`` with an edge ``u -> v`` and ``incoming(v)``
    lists every ``u`` with the same edge. Both maps are kept in sync by
    ``add`` and ``remove``, which are idempotent.
    """

    __slots__ = ("_incoming", "_outgoing")

    def __init__(self) -> None:
        self._outgoing: dict[T, dict[T, None]] = {}
        self._incoming: dict[T, dict[T, None]] = {}

    def add(self, source: T, target: T) -> None:
        """Add the edge ``source -> target``."""
        self._outgoing.setdefault(source, {})[target] = None
        self._incoming.setdefault(target, {})[source] = None

    def remove(self, source: T, target: T) -> None:
        """Remove the edge ``source -> target`` if it exists."""
        targets = self._outgoing.get(source)
        if targets is None or target not in targets:
            return
        del targets[target]
        if not targets:
            del self._outgoing[source]

        sources = self._incoming[target]
        del sources[source]
        if not sources:
            del self._incoming[target]

    def exists(self, source: T, target: T) -> bool:
        """Check whether the edge ``source -> target`` is indexed."""
        return target in self._outgoing.get(source, ())

    def outgoing(self, node: T) -> list[T]:
        """Nodes reachable from ``node`` through a single edge."""
        return list(self._outgoing.get(node, ()))

    def incoming(self, node: T) -> list[T]:
        """Nodes with a single edge leading to ``node``."""
        return list(self._incoming.get(node, ()))

    def edges(self) -> list[tuple[T, T]]:
        """All indexed edges as ``(source, target)`` pairs."""
        return [(source, target) for source, targets in self._outgoing.items() for target in targets]

    def copy(self) -> "EdgeIndex[T]":
        """Return a clone sharing no storage with this index."""
        clone: EdgeIndex[T] = EdgeIndex()
        clone._outgoing = {node: dict(targets) for node, targets in self._outgoing.items()}  # noqa: SLF001
        clone._incoming = {node: dict(sources) for node, sources in self._incoming.items()}  # noqa: SLF001
        return clone

    def __len__(self) -> int:
        return sum(len(targets) for targets in self._outgoing.values())
