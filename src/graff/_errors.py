"""Errors raised by graph algorithms."""

from collections.abc import Hashable, Sequence


class GraphError(Exception):
    """Base class for graph algorithm errors."""


class CyclicGraphError(GraphError):
    """Raised when a topological order is requested for a cyclic graph.

    Attributes:
        cycle: The nodes of the discovered cycle, with the first node repeated
            at the end (e.g. ``["a", "b", "a"]``). Empty if unknown.

    """

    def __init__(self, cycle: Sequence[Hashable] = ()) -> None:
        self.cycle = list(cycle)
        msg = "The graph cannot be cyclic"
        if self.cycle:
            msg += ": " + " -> ".join(str(node) for node in self.cycle)
        super().__init__(msg)


class DependencyOrderError(GraphError):
    """Raised when a node is layered before one of its predecessors.

    This cannot happen for a correct topological order and indicates a defect
    in the sorting code rather than a problem with the input graph.
    """

    def __init__(self, node: Hashable, predecessor: Hashable) -> None:
        self.node = node
        self.predecessor = predecessor
        super().__init__(
            f"The topological dependency order is incorrect: '{node}' was reached before its predecessor '{predecessor}'",
        )
