"""Graph layer for representing place networks as networkx graphs."""

from .errors import GraphBuildError
from .modes import TravelMode
from .travel_graph import TravelGraph
from .builder import (
    DEFAULT_PLACES,
    build_graph_from_config,
    build_graph_from_edges,
    generate_graph,
)

__all__ = [
    "GraphBuildError",
    "TravelMode",
    "TravelGraph",
    "DEFAULT_PLACES",
    "build_graph_from_config",
    "build_graph_from_edges",
    "generate_graph",
]
