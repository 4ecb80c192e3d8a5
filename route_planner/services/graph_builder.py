# route_planner/services/graph_builder.py
import math
from itertools import combinations
from typing import Iterator, List, Optional, Tuple

import networkx as nx
import numpy as np

from route_planner.core.config import RoutePolicy
from route_planner.core.logger import logger
from route_planner.models.routing import Coordinate, GraphEdge, GraphNode, RouteType
from route_planner.services.geo import distance_km

SOURCE_ID = "source"
DESTINATION_ID = "destination"

# Shared by every synthesizer built without an explicit generator.
_default_rng = np.random.default_rng()


def node_from_coordinate(node_id: str, coord: Coordinate) -> GraphNode:
    return GraphNode(
        id=node_id,
        latitude=coord.latitude,
        longitude=coord.longitude,
        display_name=coord.display_name,
        category=coord.category,
    )


class RouteGraph:
    # Small synthetic graph for one route computation.

    def __init__(self) -> None:
        # Each undirected edge is stored as two directed arcs.
        self._g = nx.DiGraph()
        self._edges: List[GraphEdge] = []

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def add_node(self, node: GraphNode) -> None:
        if node.id in self._g:
            raise ValueError(f"Duplicate node id {node.id!r}")
        self._g.add_node(node.id, node=node)

    def add_edge(self, edge: GraphEdge) -> None:
        u, v = edge.from_node_id, edge.to_node_id
        if u == v:
            raise ValueError(f"Self-loop on node {u!r}")
        for node_id in (u, v):
            if node_id not in self._g:
                raise ValueError(f"Edge references unknown node {node_id!r}")

        attrs = {
            "base_distance_km": edge.base_distance_km,
            "weight": edge.traversal_weight,
        }
        self._g.add_edge(u, v, **attrs)
        self._g.add_edge(v, u, **attrs)
        self._edges.append(edge)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._g

    def node(self, node_id: str) -> GraphNode:
        return self._g.nodes[node_id]["node"]

    @property
    def nodes(self) -> List[GraphNode]:
        return [data["node"] for _, data in self._g.nodes(data=True)]

    @property
    def edges(self) -> List[GraphEdge]:
        return list(self._edges)

    def neighbors(self, node_id: str) -> Iterator[Tuple[str, float]]:
        """
        Yield (neighbor_id, traversal_weight) for every arc leaving node_id.
        """
        for _, v, weight in self._g.out_edges(node_id, data="weight"):
            yield v, weight

    def number_of_nodes(self) -> int:
        return self._g.number_of_nodes()

    def number_of_edges(self) -> int:
        return len(self._edges)


class GraphSynthesizer:
    """
    Builds a road-like graph between two coordinates:

    - interpolated waypoints between source and destination, jittered so the
      route is not a straight line
    - a complete graph over [source, waypoints..., destination]
    - edge weights equal to the distance ("shortest") or the distance times a
      random safety factor ("safest")
    """

    def __init__(self, policy: RoutePolicy, rng: Optional[np.random.Generator] = None) -> None:
        self.policy = policy
        self.rng = rng if rng is not None else _default_rng

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def synthesize(
        self,
        source: Coordinate,
        destination: Coordinate,
        route_type: RouteType,
    ) -> RouteGraph:
        span_km = distance_km(source, destination)
        n = self.waypoint_count(span_km)

        nodes = [node_from_coordinate(SOURCE_ID, source)]
        nodes.extend(self._waypoints(source, destination, n))
        nodes.append(node_from_coordinate(DESTINATION_ID, destination))

        graph = RouteGraph()
        for node in nodes:
            graph.add_node(node)

        for a, b in combinations(nodes, 2):
            base = distance_km(a, b)
            if route_type == RouteType.SAFEST:
                factor = float(
                    self.rng.uniform(self.policy.safety_factor_min, self.policy.safety_factor_max)
                )
                weight = base * factor
            else:
                weight = base
            graph.add_edge(
                GraphEdge(
                    from_node_id=a.id,
                    to_node_id=b.id,
                    base_distance_km=base,
                    traversal_weight=weight,
                )
            )

        logger.info(
            "Synthesized {} graph: span={:.1f} km, {} waypoints, {} nodes, {} edges",
            route_type.value,
            span_km,
            n,
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return graph

    def waypoint_count(self, span_km: float) -> int:
        """
        floor(span / spacing), clamped to [min_waypoints, max_waypoints].
        """
        raw = int(math.floor(span_km / self.policy.waypoint_spacing_km))
        return max(self.policy.min_waypoints, min(raw, self.policy.max_waypoints))

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _waypoints(self, source: Coordinate, destination: Coordinate, n: int) -> List[GraphNode]:
        dlat = destination.latitude - source.latitude
        dlon = destination.longitude - source.longitude
        jitter = self.policy.jitter_fraction * math.hypot(dlat, dlon)

        waypoints: List[GraphNode] = []
        for i in range(1, n + 1):
            ratio = i / (n + 1)
            lat = source.latitude + dlat * ratio
            lon = source.longitude + dlon * ratio
            if jitter > 0:
                lat += float(self.rng.uniform(-jitter, jitter))
                lon += float(self.rng.uniform(-jitter, jitter))

            waypoints.append(
                GraphNode(
                    id=f"waypoint_{i}",
                    latitude=min(90.0, max(-90.0, lat)),
                    longitude=min(180.0, max(-180.0, lon)),
                    display_name=f"Waypoint {i}",
                    category="waypoint",
                )
            )
        return waypoints
