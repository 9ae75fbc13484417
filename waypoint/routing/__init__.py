"""Routing module for Waypoint."""

from .path_finder import (
    UNREACHABLE,
    UNREACHABLE_MESSAGE,
    PathFinder,
    is_unreachable,
)
from .navigator import Navigator
from .models import Route
from .planner import ROUTE_ORDER, plan_routes

__all__ = [
    "UNREACHABLE",
    "UNREACHABLE_MESSAGE",
    "PathFinder",
    "is_unreachable",
    "Navigator",
    "Route",
    "ROUTE_ORDER",
    "plan_routes",
]
