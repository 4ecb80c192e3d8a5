# route_planner/services/location_search.py
from typing import Any, Dict, List, Optional

import requests

from route_planner.core.config import settings
from route_planner.core.errors import LocationSearchError
from route_planner.core.logger import logger
from route_planner.models.routing import Coordinate


class LocationSearchService:
    """
    Free-text place search against an OpenStreetMap Nominatim endpoint.

    Only the API layer uses this; the route engine takes coordinates that
    were already chosen.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        limit: Optional[int] = None,
        timeout_s: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self.base_url = base_url or settings.NOMINATIM_URL
        self.limit = limit or settings.NOMINATIM_LIMIT
        self.timeout_s = timeout_s or settings.NOMINATIM_TIMEOUT_S
        # Nominatim's usage policy requires an identifying User-Agent
        self.user_agent = user_agent or settings.NOMINATIM_USER_AGENT

    def search(self, query: str) -> List[Coordinate]:
        query = query.strip()
        if not query:
            return []

        try:
            response = requests.get(
                self.base_url,
                params={
                    "format": "json",
                    "q": query,
                    "limit": self.limit,
                    "addressdetails": 1,
                },
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_s,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error(f"Location search for {query!r} failed: {exc}")
            raise LocationSearchError(f"Location search failed: {exc}") from exc

        if not isinstance(payload, list):
            raise LocationSearchError("Unexpected response from geocoding service")

        results = [self._to_coordinate(item) for item in payload]
        logger.info(f"Location search for {query!r} returned {len(results)} results")
        return results

    @staticmethod
    def _to_coordinate(item: Dict[str, Any]) -> Coordinate:
        try:
            return Coordinate(
                latitude=float(item["lat"]),
                longitude=float(item["lon"]),
                display_name=item.get("display_name") or "Location",
                category=item.get("type") or item.get("class"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise LocationSearchError(f"Malformed geocoding result: {item!r}") from exc
