"""Travel mode definitions for the travel graph."""

from enum import Enum


class TravelMode(str, Enum):
    """Ways an edge between two places can be travelled."""

    ROAD = "Road"
    SKY = "Sky"
    WATER = "Water"

    @classmethod
    def parse(cls, value: "str | TravelMode") -> "TravelMode":
        """Look up a mode by value or name, ignoring case.

        Raises:
            ValueError: If the value names no known mode.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown travel mode: {value!r}")
        for mode in cls:
            if value.lower() in (mode.value.lower(), mode.name.lower()):
                return mode
        raise ValueError(f"Unknown travel mode: {value!r}")

    @property
    def label(self) -> str:
        """Lowercase name used in route headers."""
        return self.value.lower()
