"""Tests for TravelMode."""

import pytest

from waypoint.graph.modes import TravelMode


class TestTravelMode:
    def test_exactly_three_modes(self):
        assert {m.value for m in TravelMode} == {"Road", "Sky", "Water"}

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("road", TravelMode.ROAD),
            ("Sky", TravelMode.SKY),
            ("WATER", TravelMode.WATER),
            (TravelMode.ROAD, TravelMode.ROAD),
        ],
    )
    def test_parse(self, value, expected):
        assert TravelMode.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown travel mode"):
            TravelMode.parse("rail")

    def test_parse_non_string(self):
        with pytest.raises(ValueError):
            TravelMode.parse(3)  # type: ignore[arg-type]

    def test_label(self):
        assert TravelMode.SKY.label == "sky"
