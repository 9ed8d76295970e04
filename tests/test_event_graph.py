"""Tests for the EventGraph facade."""

from graff import DirectedGraph, EventGraph, IncrementalCoffmanGrahamSorter


class TestEventGraphEdges:
    """Tests for reversed edge storage."""

    def test_add_edge_is_stored_reversed(self) -> None:
        events: EventGraph[str] = EventGraph()
        events.add_edge("a", "b")
        assert events.edge_exists("a", "b")
        assert not events.edge_exists("b", "a")
        assert events.graph.edge_exists("b", "a")
        assert not events.graph.edge_exists("a", "b")

    def test_remove_edge(self) -> None:
        events = EventGraph.from_edges([("a", "b"), ("b", "c")])
        events.remove_edge("a", "b")
        assert not events.edge_exists("a", "b")
        assert events.edge_exists("b", "c")
        assert events.node_count() == 3

    def test_remove_with_stored_order_is_noop(self) -> None:
        events = EventGraph.from_edges([("a", "b")])
        events.remove_edge("b", "a")
        assert events.edge_exists("a", "b")

    def test_wraps_existing_graph(self) -> None:
        graph = DirectedGraph.from_edges([("later", "earlier")])
        events = EventGraph(graph)
        assert events.graph is graph
        assert events.edge_exists("earlier", "later")

    def test_copy_is_independent(self) -> None:
        events = EventGraph.from_edges([("a", "b")])
        clone = events.copy()
        assert isinstance(clone, EventGraph)
        clone.add_edge("b", "c")
        assert clone.edge_exists("b", "c")
        assert not events.edge_exists("b", "c")
        assert "c" not in events

    def test_node_queries_forward_unchanged(self) -> None:
        events = EventGraph.from_edges([("a", "b")], nodes=["z"])
        assert set(events.nodes()) == {"a", "b", "z"}
        assert events.outgoing_edges("b") == ["a"]
        assert events.incoming_edges("a") == ["b"]
        assert len(events) == 3


class TestEventGraphOrdering:
    """Tests for sorting events."""

    def test_dfs_sort_lists_latest_first(self) -> None:
        events = EventGraph.from_edges([("a", "b"), ("b", "c")])
        assert events.dfs_sort() == ["c", "b", "a"]

    def test_remove_transitives(self) -> None:
        events = EventGraph.from_edges([("a", "b"), ("b", "c"), ("a", "c")])
        events.remove_transitives()
        assert not events.edge_exists("a", "c")
        assert events.edge_exists("a", "b")

    def test_sorter_is_incremental_by_default(self) -> None:
        events: EventGraph[str] = EventGraph()
        assert isinstance(events.coffman_graham_sorter(2), IncrementalCoffmanGrahamSorter)
        assert not isinstance(events.coffman_graham_sorter(2, incremental=False), IncrementalCoffmanGrahamSorter)

    def test_layers_latest_first(self) -> None:
        events = EventGraph.from_edges([("a", "b"), ("a", "c")])
        assert [set(layer) for layer in events.coffman_graham_sort(2)] == [{"b", "c"}, {"a"}]

    def test_new_events_merge_into_existing_layers(self) -> None:
        events = EventGraph.from_edges([("a", "b"), ("a", "c")])
        sorter = events.coffman_graham_sorter(2)
        sorter.sort()
        before = sorter.levels

        events.add_edge("b", "d")
        sorter.sort()

        assert {node: sorter.level_of(node) for node in before} == before
        assert sorter.level_of("d") is not None

    def test_earlier_history_merges_in_order(self) -> None:
        events = EventGraph.from_edges([("boot", "login"), ("boot", "sync")])
        sorter = events.coffman_graham_sorter(2)
        assert [set(layer) for layer in sorter.sort()] == [{"login", "sync"}, {"boot"}]

        events.add_edge("power-on", "boot")
        events.add_edge("self-test", "boot")
        layers = sorter.sort()

        assert [set(layer) for layer in layers] == [{"login", "sync"}, {"boot"}, {"power-on", "self-test"}]
        for later, earlier in events.edges():
            assert sorter.level_of(later) < sorter.level_of(earlier)


def test_public_methods_are_documented() -> None:
    undocumented = [
        name
        for name, member in vars(EventGraph).items()
        if callable(member) and not name.startswith("_") and not member.__doc__
    ]
    assert undocumented == []
