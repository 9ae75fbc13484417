"""Builders for constructing TravelGraph instances."""

import logging
import random
from typing import Iterable, Sequence

from ..config.models import DEFAULT_PLACES, NetworkConfig
from .errors import GraphBuildError
from .modes import TravelMode
from .travel_graph import TravelGraph

logger = logging.getLogger(__name__)


def _add_places(graph: TravelGraph, places: Sequence[str]) -> None:
    if not places:
        raise GraphBuildError("A travel graph needs at least one place")
    for place in places:
        graph.add_place(place)


def generate_graph(
    places: Sequence[str] = DEFAULT_PLACES,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> TravelGraph:
    """Generate a complete travel graph with random edge modes.

    Every ordered pair of distinct places gets exactly one edge whose mode
    is drawn uniformly from all travel modes.

    Args:
        places: The place names, in the order they should be stored.
        seed: Seed for a fresh random generator. Ignored if ``rng`` is given.
        rng: Random generator to draw modes from.

    Returns:
        A frozen TravelGraph.

    Raises:
        GraphBuildError: If the place set is empty or has duplicates.
    """
    if rng is None:
        rng = random.Random(seed)

    graph = TravelGraph()
    _add_places(graph, places)

    modes = list(TravelMode)
    for from_place in places:
        for to_place in places:
            if from_place != to_place:
                graph.add_edge(from_place, to_place, rng.choice(modes))

    logger.debug(
        "Generated travel graph", extra={"places": len(places), "seed": seed}
    )
    return graph.freeze()


def build_graph_from_edges(
    places: Sequence[str],
    edges: Iterable[tuple[str, str, TravelMode | str]],
) -> TravelGraph:
    """Build a travel graph from an explicit edge list.

    Pairs missing from ``edges`` simply have no edge, so the result need not
    be complete.

    Args:
        places: The place names, in the order they should be stored.
        edges: Tuples of (from_place, to_place, mode).

    Returns:
        A frozen TravelGraph.

    Raises:
        GraphBuildError: On duplicate places, self-edges, unknown places,
            repeated pairs or unknown modes.
    """
    graph = TravelGraph()
    _add_places(graph, places)

    for from_place, to_place, mode in edges:
        try:
            parsed = TravelMode.parse(mode)
        except ValueError as e:
            raise GraphBuildError(str(e)) from e
        graph.add_edge(from_place, to_place, parsed)

    return graph.freeze()


def build_graph_from_config(
    config: NetworkConfig, seed: int | None = None
) -> TravelGraph:
    """Build the travel graph a NetworkConfig describes.

    Fixed edges are used as-is when the config lists them; otherwise a
    random complete graph is generated over the configured places.

    Args:
        config: The validated network config.
        seed: Overrides the config's seed when given.

    Returns:
        A frozen TravelGraph.
    """
    if config.edges is not None:
        if seed is not None or config.seed is not None:
            logger.warning(
                "Ignoring seed: the config pins its edges, nothing is generated"
            )
        return build_graph_from_edges(
            config.places,
            [(edge.from_place, edge.to, edge.mode) for edge in config.edges],
        )

    return generate_graph(
        config.places, seed=seed if seed is not None else config.seed
    )
