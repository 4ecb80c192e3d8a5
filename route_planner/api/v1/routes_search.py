# route_planner/api/v1/routes_search.py
from fastapi import APIRouter, HTTPException, Query

from route_planner.core.errors import LocationSearchError
from route_planner.models.routing import LocationSearchResponse
from route_planner.services.location_search import LocationSearchService

router = APIRouter(
    prefix="/search",
    tags=["search"],
)

location_search = LocationSearchService()


@router.get(
    "/",
    response_model=LocationSearchResponse,
    summary="Search places by name",
)
def search_locations(q: str = Query("", description="Free-text place name")) -> LocationSearchResponse:
    """
    Look up candidate coordinates for a place name via Nominatim.
    """
    try:
        results = location_search.search(q)
    except LocationSearchError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return LocationSearchResponse(query=q, results=results)
