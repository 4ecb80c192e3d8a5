# route_planner/services/pathfinding.py
import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from route_planner.core.errors import UnreachableDestinationError
from route_planner.services.graph_builder import RouteGraph

INF = float("inf")


@dataclass
class ShortestPathTree:
    # Only nodes reached by the search appear in either map.
    distances: Dict[str, float] = field(default_factory=dict)
    predecessors: Dict[str, Optional[str]] = field(default_factory=dict)

    def distance_to(self, node_id: str) -> float:
        return self.distances.get(node_id, INF)


def dijkstra(graph: RouteGraph, source_id: str, target_id: str) -> ShortestPathTree:
    """
    Single-source shortest path over non-negative traversal weights.

    Stops as soon as the target is popped from the frontier; nodes not
    reached by then keep an infinite distance.
    """
    for node_id in (source_id, target_id):
        if node_id not in graph:
            raise KeyError(node_id)

    tree = ShortestPathTree()
    tree.distances[source_id] = 0.0
    tree.predecessors[source_id] = None

    pq: List[Tuple[float, str]] = [(0.0, source_id)]
    settled = set()

    while pq:
        d, u = heapq.heappop(pq)
        if u in settled:
            continue
        settled.add(u)
        if u == target_id:
            break
        for v, w in graph.neighbors(u):
            if v in settled:
                continue
            nd = d + w
            if nd < tree.distance_to(v):
                tree.distances[v] = nd
                tree.predecessors[v] = u
                heapq.heappush(pq, (nd, v))

    return tree


def reconstruct_path(tree: ShortestPathTree, source_id: str, target_id: str) -> List[str]:
    """
    Walk predecessor links back from target to source and return the node ids
    in travel order.
    """
    if tree.distance_to(target_id) == INF:
        raise UnreachableDestinationError(f"No path from {source_id!r} to {target_id!r}")

    path_rev: List[str] = [target_id]
    cur = target_id
    while cur != source_id:
        prev = tree.predecessors.get(cur)
        if prev is None or prev in path_rev:
            raise UnreachableDestinationError(
                f"Predecessor chain broken at {cur!r} before reaching {source_id!r}"
            )
        path_rev.append(prev)
        cur = prev

    return list(reversed(path_rev))
