"""Output formatting for Waypoint."""

from .formatter import format_graph, format_report, format_route_text, format_routes

__all__ = [
    "format_graph",
    "format_report",
    "format_route_text",
    "format_routes",
]
