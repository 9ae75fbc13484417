"""Plan routes between two places under several travel modes."""

import logging
from typing import Iterable

from ..graph.modes import TravelMode
from ..graph.travel_graph import TravelGraph
from .models import Route
from .navigator import Navigator

logger = logging.getLogger(__name__)

ROUTE_ORDER: tuple[TravelMode, ...] = (
    TravelMode.ROAD,
    TravelMode.SKY,
    TravelMode.WATER,
)


def plan_routes(
    graph: TravelGraph,
    origin: str,
    destination: str,
    modes: Iterable[TravelMode | str] | None = None,
) -> list[Route]:
    """Ask a navigator for each mode and collect the results.

    Args:
        graph: The travel graph to route through.
        origin: The starting place.
        destination: The place to reach.
        modes: Modes to try, in order. Defaults to road, sky, water.

    Returns:
        One Route per mode, in the order the modes were given.
    """
    if modes is None:
        modes = ROUTE_ORDER

    routes = []
    for mode in modes:
        navigator = Navigator.for_mode(mode, graph)
        route = Route(
            mode=navigator.mode,
            origin=origin,
            destination=destination,
            path=navigator.find_path(origin, destination),
        )
        logger.info(
            "Planned %s route from %s to %s: %s",
            route.mode.label,
            origin,
            destination,
            "found" if route.found else "unreachable",
        )
        routes.append(route)

    return routes
