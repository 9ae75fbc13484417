"""Tests for routing.navigator and routing.planner."""

from waypoint.graph.modes import TravelMode
from waypoint.routing.models import Route
from waypoint.routing.navigator import Navigator
from waypoint.routing.path_finder import UNREACHABLE_MESSAGE, PathFinder
from waypoint.routing.planner import ROUTE_ORDER, plan_routes


class TestNavigator:
    def test_delegates_to_path_finder(self, triangle_graph):
        finder = PathFinder(TravelMode.ROAD, triangle_graph)
        navigator = Navigator(finder)

        assert navigator.find_path("A", "C") == finder.find_path("A", "C")
        assert navigator.mode is TravelMode.ROAD

    def test_for_mode(self, triangle_graph):
        navigator = Navigator.for_mode("sky", triangle_graph)

        assert navigator.mode is TravelMode.SKY
        assert navigator.find_path("A", "C") == ["A", "C"]

    def test_failure_passes_through(self, triangle_graph):
        navigator = Navigator.for_mode(TravelMode.WATER, triangle_graph)

        assert navigator.find_path("A", "C") == [UNREACHABLE_MESSAGE]


class TestPlanRoutes:
    def test_default_order(self, triangle_graph):
        routes = plan_routes(triangle_graph, "A", "C")

        assert [r.mode for r in routes] == list(ROUTE_ORDER)
        assert [r.path for r in routes] == [
            ["A", "B", "C"],
            ["A", "C"],
            [UNREACHABLE_MESSAGE],
        ]
        assert [r.found for r in routes] == [True, True, False]

    def test_selected_modes(self, triangle_graph):
        routes = plan_routes(triangle_graph, "C", "A", ["water"])

        assert routes == [
            Route(mode=TravelMode.WATER, origin="C", destination="A", path=["C", "A"])
        ]
