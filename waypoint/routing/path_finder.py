"""Greedy single-mode path finding through a travel graph."""

import logging
from typing import Sequence

from ..graph.modes import TravelMode
from ..graph.travel_graph import TravelGraph

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "You will not reach your destination."
UNREACHABLE: tuple[str, ...] = (UNREACHABLE_MESSAGE,)


def is_unreachable(path: Sequence[str]) -> bool:
    """Check whether a path is the failure marker."""
    return list(path) == list(UNREACHABLE)


class PathFinder:
    """Walks a travel graph using edges of a single travel mode.

    The walk is greedy: at each place it commits to the first neighbor,
    in stored order, that is reachable by this finder's mode and not yet
    on the path. It never backtracks, so it can report failure even when
    another choice of neighbor would have reached the destination.
    """

    def __init__(self, mode: TravelMode | str, graph: TravelGraph):
        self._mode = TravelMode.parse(mode)
        self._graph = graph

    @property
    def mode(self) -> TravelMode:
        return self._mode

    @property
    def graph(self) -> TravelGraph:
        return self._graph

    def find_path(self, origin: str, destination: str) -> list[str]:
        """Find a path from origin to destination.

        Args:
            origin: The starting place.
            destination: The place to reach.

        Returns:
            The places walked, origin and destination included, or a
            one-element list holding ``UNREACHABLE_MESSAGE``.
        """
        path = self._walk(origin, destination)
        if is_unreachable(path):
            logger.debug(
                "No %s path from %s to %s", self._mode.label, origin, destination
            )
        return path

    def _walk(self, origin: str, destination: str) -> list[str]:
        path: list[str] = []
        visited: set[str] = set()
        current = origin

        while current != destination:
            if not self._graph.contains(current) or not self._graph.contains(destination):
                return list(UNREACHABLE)

            next_place = None
            for neighbor, mode in self._graph.neighbors(current).items():
                if mode == self._mode and neighbor not in visited:
                    next_place = neighbor
                    break

            if next_place is None:
                return list(UNREACHABLE)

            logger.debug("%s: %s -> %s", self._mode.label, current, next_place)
            path.append(current)
            visited.add(current)
            current = next_place

        path.append(current)
        return path
