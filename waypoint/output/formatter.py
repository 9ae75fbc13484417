"""Output formatting for graph dumps and routes."""

import json
from typing import Literal

from ..graph.travel_graph import TravelGraph
from ..routing.models import Route


def format_route_text(route: Route) -> str:
    """Format a route as a ``by {mode}`` header plus ``>{place} `` tokens."""
    tokens = "".join(f">{place} " for place in route.path)
    return f"by {route.mode.label}\n{tokens}\n\n"


def format_routes(
    routes: list[Route],
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a list of routes for output."""
    if format == "json":
        return json.dumps({"routes": _routes_data(routes)}, indent=2)
    return "".join(format_route_text(route) for route in routes)


def format_graph(
    graph: TravelGraph,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a graph dump for output."""
    if format == "json":
        return json.dumps({"graph": _graph_data(graph)}, indent=2)
    return graph.to_text()


def format_report(
    graph: TravelGraph,
    routes: list[Route],
    format: Literal["text", "json"] = "text",
) -> str:
    """Format the full report: graph dump followed by every route.

    Args:
        graph: The travel graph that was routed through.
        routes: The routes to report.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        data = {"graph": _graph_data(graph), "routes": _routes_data(routes)}
        return json.dumps(data, indent=2)

    # The dump is printed as its own line, so one extra newline follows it
    return graph.to_text() + "\n" + format_routes(routes)


def _graph_data(graph: TravelGraph) -> list[dict]:
    return [
        {"from": source, "to": target, "mode": mode.value}
        for source, target, mode in graph.edges()
    ]


def _routes_data(routes: list[Route]) -> list[dict]:
    return [
        {
            "mode": route.mode.value,
            "origin": route.origin,
            "destination": route.destination,
            "found": route.found,
            "path": list(route.path),
        }
        for route in routes
    ]
