# route_planner/models/routing.py

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """
    A named latitude/longitude point, either picked on the map or returned
    by the location search.

    Ranges are not enforced here: the routing service checks them and
    reports an `invalid_coordinate` failure instead.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    display_name: str = "Location"
    category: Optional[str] = None


class RouteType(str, Enum):
    SHORTEST = "shortest"
    SAFEST = "safest"


class RouteRequest(BaseModel):
    """
    Request body for the /route endpoint.
    """
    source: Coordinate
    destination: Coordinate
    route_type: RouteType = RouteType.SHORTEST


class GraphNode(BaseModel):
    """
    A node of the synthesized graph.

    The ids "source" and "destination" are reserved for the caller's
    endpoints; everything else is a "waypoint_<k>".
    """

    model_config = ConfigDict(frozen=True)

    id: str
    latitude: float
    longitude: float
    display_name: str
    category: Optional[str] = None


class GraphEdge(BaseModel):
    """
    Undirected connection between two graph nodes.

    base_distance_km is the great-circle length; traversal_weight is what the
    solver minimises (equal to the length for "shortest").
    """

    model_config = ConfigDict(frozen=True)

    from_node_id: str
    to_node_id: str
    base_distance_km: float = Field(ge=0.0)
    traversal_weight: float = Field(ge=0.0)


class Direction(BaseModel):
    """
    One turn-by-turn instruction, covering a single leg of the path.
    """
    instruction_text: str
    leg_distance_km: float = Field(ge=0.0)
    compass_label: Optional[str] = None
    maneuver: Literal["depart", "continue", "arrive"]


class RouteResult(BaseModel):
    ordered_path: List[GraphNode]
    total_distance_km: float
    total_time_minutes: float
    directions: List[Direction]
    algorithm_label: str
    route_type: RouteType
    waypoint_count: int = 0
    weighted_cost: float = 0.0


class RouteFailure(BaseModel):
    code: Literal["invalid_coordinate", "degenerate_segment", "unreachable_destination"]
    message: str


class RouteOutcome(BaseModel):
    """
    Response for the /route endpoint.

    Exactly one of `route` (status "ok") or `error` (status "error") is set.
    """
    status: Literal["ok", "error"]
    route: Optional[RouteResult] = None
    error: Optional[RouteFailure] = None


class LocationSearchResponse(BaseModel):
    query: str
    results: List[Coordinate]
