# route_planner/services/directions.py
from typing import List, Optional, Sequence

from route_planner.models.routing import Direction, GraphNode
from route_planner.services.geo import bearing_label, distance_km

# Legs shorter than this have no meaningful heading.
MIN_LEG_KM = 1e-6


def generate_directions(path: Sequence[GraphNode]) -> List[Direction]:
    """
    Turn an ordered path into one instruction per leg.

    The first leg departs from the source, the last one arrives at the
    destination, and everything in between is a "continue". A route made of a
    single leg gets a single "arrive" entry that mentions both ends. Paths
    with fewer than two nodes have no legs and give an empty list.
    """
    directions: List[Direction] = []
    if len(path) < 2:
        return directions

    last = len(path) - 2

    for i, (current, nxt) in enumerate(zip(path[:-1], path[1:])):
        leg_km = distance_km(current, nxt)
        compass: Optional[str] = bearing_label(current, nxt) if leg_km > MIN_LEG_KM else None
        heading = compass.lower() if compass else "ahead"

        if i == last and i == 0:
            text = (
                f"Start at {current.display_name} and head {heading} "
                f"to arrive at {nxt.display_name}"
            )
            maneuver = "arrive"
        elif i == 0:
            text = f"Start at {current.display_name} and head {heading} toward {nxt.display_name}"
            maneuver = "depart"
        elif i == last:
            text = f"Arrive at {nxt.display_name} after {leg_km:.1f} km heading {heading}"
            maneuver = "arrive"
        else:
            text = f"Continue {heading} toward {nxt.display_name} for {leg_km:.1f} km"
            maneuver = "continue"

        directions.append(
            Direction(
                instruction_text=text,
                leg_distance_km=round(leg_km, 1),
                compass_label=compass,
                maneuver=maneuver,
            )
        )

    return directions
