"""Topological order, transitive reduction and layering of a directed graph."""

import graff

graph = graff.DirectedGraph.from_edges(
    [("A", "B"), ("B", "C"), ("A", "C")],
    nodes=["D"],
)

print("topological order:", graph.dfs_sort())

reduced = graph.copy()
reduced.remove_transitives()
print("reduced edges:", reduced.edges())

print("layers (width=2):", graph.coffman_graham_sort(2))
