"""Caller-facing navigator bound to one path finder."""

from ..graph.modes import TravelMode
from ..graph.travel_graph import TravelGraph
from .path_finder import PathFinder


class Navigator:
    """Forwards route requests to the path finder it was built with."""

    def __init__(self, path_finder: PathFinder):
        self._path_finder = path_finder

    @classmethod
    def for_mode(cls, mode: TravelMode | str, graph: TravelGraph) -> "Navigator":
        """Create a navigator over ``graph`` restricted to ``mode``."""
        return cls(PathFinder(mode, graph))

    @property
    def mode(self) -> TravelMode:
        return self._path_finder.mode

    def find_path(self, origin: str, destination: str) -> list[str]:
        return self._path_finder.find_path(origin, destination)
