"""Data models for route results."""

from dataclasses import dataclass, field

from ..graph.modes import TravelMode
from .path_finder import is_unreachable


@dataclass
class Route:
    """The outcome of asking for a path under one travel mode."""

    mode: TravelMode
    origin: str
    destination: str
    path: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether the path reaches the destination."""
        return not is_unreachable(self.path)
