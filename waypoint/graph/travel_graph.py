"""TravelGraph wrapper around networkx for place networks."""

from typing import Iterator

import networkx as nx

from .errors import GraphBuildError
from .modes import TravelMode


class TravelGraph:
    """A directed graph of places joined by mode-tagged edges.

    Wraps a networkx DiGraph. Places and edges keep their insertion order,
    which is the order neighbor scans and the text dump follow. Once
    ``freeze`` has been called the graph is read-only and can be shared
    freely between navigators.
    """

    def __init__(self):
        """Initialize an empty travel graph."""
        self._graph = nx.DiGraph()

    @property
    def is_frozen(self) -> bool:
        """Whether the graph has been frozen against mutation."""
        return nx.is_frozen(self._graph)

    def freeze(self) -> "TravelGraph":
        """Make the graph read-only and return it."""
        nx.freeze(self._graph)
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_place(self, name: str) -> None:
        """Add a place to the graph.

        Args:
            name: The place name.

        Raises:
            GraphBuildError: If the name is empty or already present.
        """
        if not name:
            raise GraphBuildError("Place names must be non-empty")
        if self._graph.has_node(name):
            raise GraphBuildError(f"Duplicate place: {name!r}")
        self._graph.add_node(name)

    def add_edge(self, from_place: str, to_place: str, mode: TravelMode) -> None:
        """Add a directed edge between two known places.

        Args:
            from_place: The source place.
            to_place: The destination place.
            mode: How the edge is travelled.

        Raises:
            GraphBuildError: On self-edges, unknown places or a repeated pair.
        """
        if from_place == to_place:
            raise GraphBuildError(f"Self-edge on {from_place!r} is not allowed")
        for place in (from_place, to_place):
            if not self._graph.has_node(place):
                raise GraphBuildError(f"Edge references unknown place {place!r}")
        if self._graph.has_edge(from_place, to_place):
            raise GraphBuildError(
                f"Duplicate edge from {from_place!r} to {to_place!r}"
            )

        self._graph.add_edge(from_place, to_place, mode=TravelMode.parse(mode))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def places(self) -> tuple[str, ...]:
        """All places in insertion order."""
        return tuple(self._graph.nodes)

    def contains(self, place: str) -> bool:
        """Check whether a place is part of the graph."""
        return self._graph.has_node(place)

    def __contains__(self, place: object) -> bool:
        return isinstance(place, str) and self.contains(place)

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def neighbors(self, place: str) -> dict[str, TravelMode]:
        """Get the outgoing edges of a place, keyed by destination.

        Unknown places have no neighbors.
        """
        if not self._graph.has_node(place):
            return {}
        return {
            target: data["mode"]
            for target, data in self._graph.adj[place].items()
        }

    def edges(self) -> Iterator[tuple[str, str, TravelMode]]:
        """Iterate over all edges.

        Yields:
            Tuples of (from_place, to_place, mode), grouped by source place.
        """
        for source in self._graph.nodes:
            for target, mode in self.neighbors(source).items():
                yield source, target, mode

    def to_text(self) -> str:
        """Render one line per edge, with a blank line after each place."""
        lines: list[str] = []
        for source in self._graph.nodes:
            for target, mode in self.neighbors(source).items():
                lines.append(f"From - {source} to {target} by {mode.value}\n")
            lines.append("\n")
        return "".join(lines)
