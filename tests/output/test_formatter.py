"""Tests for output formatting."""

import json

from waypoint.graph.modes import TravelMode
from waypoint.output.formatter import (
    format_graph,
    format_report,
    format_route_text,
    format_routes,
)
from waypoint.routing.models import Route
from waypoint.routing.path_finder import UNREACHABLE_MESSAGE
from waypoint.routing.planner import plan_routes


class TestRouteText:
    def test_found_route(self):
        route = Route(TravelMode.ROAD, "A", "C", ["A", "B", "C"])

        assert format_route_text(route) == "by road\n>A >B >C \n\n"

    def test_unreachable_route(self):
        route = Route(TravelMode.WATER, "A", "C", [UNREACHABLE_MESSAGE])

        assert format_route_text(route) == (
            "by water\n>You will not reach your destination. \n\n"
        )

    def test_place_names_with_spaces(self):
        route = Route(TravelMode.SKY, "New York", "Miami", ["New York", "Miami"])

        assert format_route_text(route) == "by sky\n>New York >Miami \n\n"


class TestFormatReport:
    def test_text_report(self, triangle_graph):
        routes = plan_routes(triangle_graph, "A", "C")

        assert format_report(triangle_graph, routes) == (
            "From - A to B by Road\n"
            "From - A to C by Sky\n"
            "\n"
            "From - B to C by Road\n"
            "\n"
            "From - C to A by Water\n"
            "\n"
            "\n"
            "by road\n>A >B >C \n\n"
            "by sky\n>A >C \n\n"
            "by water\n>You will not reach your destination. \n\n"
        )

    def test_json_report(self, triangle_graph):
        routes = plan_routes(triangle_graph, "A", "C")

        data = json.loads(format_report(triangle_graph, routes, "json"))

        assert data["graph"][0] == {"from": "A", "to": "B", "mode": "Road"}
        assert len(data["graph"]) == 4
        assert data["routes"][0] == {
            "mode": "Road",
            "origin": "A",
            "destination": "C",
            "found": True,
            "path": ["A", "B", "C"],
        }
        assert data["routes"][2]["found"] is False


class TestFormatGraphAndRoutes:
    def test_graph_text_is_dump(self, two_place_graph):
        assert format_graph(two_place_graph) == two_place_graph.to_text()

    def test_graph_json(self, two_place_graph):
        data = json.loads(format_graph(two_place_graph, "json"))

        assert data == {
            "graph": [
                {"from": "A", "to": "B", "mode": "Road"},
                {"from": "B", "to": "A", "mode": "Sky"},
            ]
        }

    def test_routes_json(self, triangle_graph):
        routes = plan_routes(triangle_graph, "A", "C", ["sky"])

        data = json.loads(format_routes(routes, "json"))

        assert list(data) == ["routes"]
        assert data["routes"][0]["path"] == ["A", "C"]

    def test_routes_text(self, triangle_graph):
        routes = plan_routes(triangle_graph, "A", "C", ["sky", "water"])

        assert format_routes(routes) == (
            "by sky\n>A >C \n\n"
            "by water\n>You will not reach your destination. \n\n"
        )
