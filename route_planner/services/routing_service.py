# route_planner/services/routing_service.py

from time import perf_counter
from typing import List, Optional

import numpy as np

from route_planner.core.config import RoutePolicy, settings
from route_planner.core.errors import InvalidCoordinateError, RoutingError
from route_planner.core.logger import logger
from route_planner.models.routing import (
    Coordinate,
    GraphNode,
    RouteFailure,
    RouteOutcome,
    RouteResult,
    RouteType,
)
from route_planner.services.directions import generate_directions
from route_planner.services.geo import distance_km
from route_planner.services.graph_builder import (
    DESTINATION_ID,
    SOURCE_ID,
    GraphSynthesizer,
    node_from_coordinate,
)
from route_planner.services.pathfinding import dijkstra, reconstruct_path

# Spans below this are treated as "source == destination".
DEGENERATE_SPAN_KM = 1e-6

ALGORITHM_LABELS = {
    RouteType.SHORTEST: "Dijkstra (Distance)",
    RouteType.SAFEST: "Dijkstra (Safety-Weighted)",
}
DEGENERATE_LABEL = "Already at destination"


class RoutingService:
    """
    High-level routing service:
    - validates the endpoints
    - synthesizes a waypoint graph between them
    - runs Dijkstra from source to destination
    - aggregates distance/time and builds turn-by-turn directions

    Failures detected along the way come back as an "error" RouteOutcome
    rather than as exceptions.
    """

    def __init__(
        self,
        policy: Optional[RoutePolicy] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.policy = policy or settings.route_policy()
        self.synthesizer = GraphSynthesizer(self.policy, rng=rng)
        logger.info(f"RoutingService initialised with policy {self.policy.model_dump()}")

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def compute_route(
        self,
        source: Coordinate,
        destination: Coordinate,
        route_type: RouteType = RouteType.SHORTEST,
    ) -> RouteOutcome:
        """
        Main entry point for the /route endpoint.

        1. Validate coordinates.
        2. Short-circuit when source and destination coincide.
        3. Synthesize the graph.
        4. Dijkstra on traversal weights.
        5. Reconstruct the path and aggregate distance and duration.
        6. Build directions.
        """
        route_type = RouteType(route_type)
        logger.info(
            "Received {} routing request from ({:.6f}, {:.6f}) -> ({:.6f}, {:.6f})",
            route_type.value,
            source.latitude,
            source.longitude,
            destination.latitude,
            destination.longitude,
        )

        try:
            return RouteOutcome(status="ok", route=self._compute(source, destination, route_type))
        except RoutingError as exc:
            logger.warning(f"Route computation failed ({exc.code}): {exc}")
            return RouteOutcome(
                status="error",
                error=RouteFailure(code=exc.code, message=str(exc)),
            )

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _compute(
        self,
        source: Coordinate,
        destination: Coordinate,
        route_type: RouteType,
    ) -> RouteResult:
        t0 = perf_counter()

        # 1) Validate
        self._validate(source, "source")
        self._validate(destination, "destination")

        # 2) Degenerate input
        if distance_km(source, destination) < DEGENERATE_SPAN_KM:
            logger.info("Source and destination coincide; returning single-node route")
            return RouteResult(
                ordered_path=[node_from_coordinate(SOURCE_ID, source)],
                total_distance_km=0.0,
                total_time_minutes=0.0,
                directions=[],
                algorithm_label=DEGENERATE_LABEL,
                route_type=route_type,
            )

        # 3) Graph
        t_graph0 = perf_counter()
        graph = self.synthesizer.synthesize(source, destination, route_type)
        t_graph1 = perf_counter()
        logger.info(f"Graph synthesized in {(t_graph1 - t_graph0) * 1000.0:.2f} ms")

        # 4) Shortest path
        t_sp0 = perf_counter()
        tree = dijkstra(graph, SOURCE_ID, DESTINATION_ID)
        path_ids = reconstruct_path(tree, SOURCE_ID, DESTINATION_ID)
        t_sp1 = perf_counter()
        logger.info(
            f"Shortest path found with {len(path_ids)} nodes in {(t_sp1 - t_sp0) * 1000.0:.2f} ms"
        )

        # 5) Aggregate
        path = [graph.node(node_id) for node_id in path_ids]
        total_km = self._path_distance_km(path)
        total_min = self._compute_minutes_from_distance(total_km)

        # 6) Directions
        directions = generate_directions(path)

        logger.info(
            f"Route summary: distance={total_km:.2f} km, duration={total_min:.1f} min, "
            f"total time {(perf_counter() - t0) * 1000.0:.2f} ms"
        )

        return RouteResult(
            ordered_path=path,
            total_distance_km=round(total_km, 2),
            total_time_minutes=round(total_min, 1),
            directions=directions,
            algorithm_label=ALGORITHM_LABELS[route_type],
            route_type=route_type,
            waypoint_count=graph.number_of_nodes() - 2,
            weighted_cost=round(tree.distance_to(DESTINATION_ID), 2),
        )

    @staticmethod
    def _validate(coord: Coordinate, role: str) -> None:
        if not -90.0 <= coord.latitude <= 90.0:
            raise InvalidCoordinateError(
                f"{role} latitude {coord.latitude} is outside [-90, 90]"
            )
        if not -180.0 <= coord.longitude <= 180.0:
            raise InvalidCoordinateError(
                f"{role} longitude {coord.longitude} is outside [-180, 180]"
            )

    @staticmethod
    def _path_distance_km(path: List[GraphNode]) -> float:
        # Physical length from coordinates, independent of safety weighting.
        return sum(distance_km(a, b) for a, b in zip(path[:-1], path[1:]))

    def _compute_minutes_from_distance(self, km: float) -> float:
        """
        Convert distance in km to minutes using the policy's average speed.
        """
        if km <= 0:
            return 0.0
        return km * 60.0 / self.policy.average_speed_kmh
