# route_planner/core/errors.py


class RoutingError(Exception):
    """
    Base class for failures detected by the route engine.

    `code` is the machine-readable identifier reported back to API callers.
    """

    code: str = "routing_error"


class InvalidCoordinateError(RoutingError):
    """Latitude or longitude outside its valid range."""

    code = "invalid_coordinate"


class DegenerateSegmentError(RoutingError):
    """Bearing requested for a zero-length segment."""

    code = "degenerate_segment"


class UnreachableDestinationError(RoutingError):
    """The solver never settled the destination node."""

    code = "unreachable_destination"


class LocationSearchError(RuntimeError):
    """The geocoding backend failed or returned something unusable."""
