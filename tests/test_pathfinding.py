# tests/test_pathfinding.py
import pytest

from route_planner.core.errors import UnreachableDestinationError
from route_planner.models.routing import GraphEdge, GraphNode, RouteType
from route_planner.services.graph_builder import (
    DESTINATION_ID,
    SOURCE_ID,
    GraphSynthesizer,
    RouteGraph,
)
from route_planner.services.pathfinding import (
    INF,
    ShortestPathTree,
    dijkstra,
    reconstruct_path,
)


def _graph(node_ids, edges):
    graph = RouteGraph()
    for i, node_id in enumerate(node_ids):
        graph.add_node(GraphNode(id=node_id, latitude=0.0, longitude=float(i), display_name=node_id))
    for u, v, w in edges:
        graph.add_edge(GraphEdge(from_node_id=u, to_node_id=v, base_distance_km=w, traversal_weight=w))
    return graph


def test_prefers_chain_over_longer_direct_edge():
    # Chain 1 -> 2 -> 3 plus a direct but slightly longer edge 1 -> 3
    graph = _graph(["1", "2", "3"], [("1", "2", 1.0), ("2", "3", 1.5), ("1", "3", 2.6)])

    tree = dijkstra(graph, "1", "3")

    assert reconstruct_path(tree, "1", "3") == ["1", "2", "3"]
    assert tree.distance_to("3") == pytest.approx(2.5)
    assert tree.predecessors["2"] == "1"


def test_takes_direct_edge_when_cheaper():
    graph = _graph(["1", "2", "3"], [("1", "2", 1.0), ("2", "3", 1.5), ("1", "3", 2.0)])

    tree = dijkstra(graph, "1", "3")

    assert reconstruct_path(tree, "1", "3") == ["1", "3"]


def test_edges_are_traversed_both_ways():
    graph = _graph(["a", "b", "c"], [("a", "b", 2.0), ("b", "c", 3.0)])

    tree = dijkstra(graph, "c", "a")

    assert reconstruct_path(tree, "c", "a") == ["c", "b", "a"]
    assert tree.distance_to("a") == pytest.approx(5.0)


def test_zero_weight_edges_are_allowed():
    graph = _graph(["a", "b", "c"], [("a", "b", 0.0), ("b", "c", 0.0), ("a", "c", 1.0)])

    tree = dijkstra(graph, "a", "c")

    assert tree.distance_to("c") == 0.0
    assert reconstruct_path(tree, "a", "c") == ["a", "b", "c"]


def test_disconnected_destination_is_unreachable():
    graph = _graph(["a", "b", "c"], [("a", "b", 1.0)])

    tree = dijkstra(graph, "a", "c")

    assert tree.distance_to("c") == INF
    assert "c" not in tree.predecessors
    with pytest.raises(UnreachableDestinationError):
        reconstruct_path(tree, "a", "c")


def test_broken_predecessor_chain_is_unreachable():
    tree = ShortestPathTree(
        distances={"a": 0.0, "b": 1.0, "c": 2.0},
        predecessors={"a": None, "b": None, "c": "b"},
    )
    with pytest.raises(UnreachableDestinationError):
        reconstruct_path(tree, "a", "c")


def test_unknown_node_raises_key_error():
    graph = _graph(["a", "b"], [("a", "b", 1.0)])

    with pytest.raises(KeyError):
        dijkstra(graph, "a", "zzz")


def test_solver_never_beats_direct_chain_sum(policy, rng, new_york, london):
    graph = GraphSynthesizer(policy, rng=rng).synthesize(new_york, london, RouteType.SHORTEST)
    ids = [node.id for node in graph.nodes]
    weights = {(e.from_node_id, e.to_node_id): e.base_distance_km for e in graph.edges}
    chain_km = sum(weights[(u, v)] for u, v in zip(ids[:-1], ids[1:]))

    tree = dijkstra(graph, SOURCE_ID, DESTINATION_ID)

    assert tree.distance_to(DESTINATION_ID) <= chain_km + 1e-9
