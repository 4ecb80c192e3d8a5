# route_planner/api/v1/routes_routing.py
from fastapi import APIRouter, Response, status

from route_planner.models.routing import RouteOutcome, RouteRequest
from route_planner.services.routing_service import RoutingService

router = APIRouter(
    prefix="/route",
    tags=["routing"],
)

# Single shared instance; it holds no per-request state
routing_service = RoutingService()


@router.post(
    "/",
    response_model=RouteOutcome,
    summary="Compute a route between source and destination",
)
def compute_route(request: RouteRequest, response: Response) -> RouteOutcome:
    """
    Compute a route over a synthetic waypoint graph between the two points.

    - "shortest" minimises great-circle distance.
    - "safest" minimises distance weighted by a simulated safety factor.

    Routing failures are returned in the body with status 400.
    """
    outcome = routing_service.compute_route(
        request.source,
        request.destination,
        request.route_type,
    )
    if outcome.status == "error":
        response.status_code = status.HTTP_400_BAD_REQUEST
    return outcome
