"""Pydantic models for network configuration."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_PLACES: tuple[str, ...] = (
    "New York",
    "Los Angeles",
    "Chicago",
    "Houston",
    "Miami",
)


class EdgeSpec(BaseModel):
    """A fixed edge between two places."""

    from_place: str = Field(alias="from")
    to: str
    mode: Literal["road", "sky", "water"]

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, value):
        """Accept mode names in any case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


class NetworkConfig(BaseModel):
    """A place network and the default route to plan through it."""

    places: list[str] = Field(default_factory=lambda: list(DEFAULT_PLACES))
    seed: int | None = None
    origin: str | None = None
    destination: str | None = None
    edges: list[EdgeSpec] | None = None

    @field_validator("places")
    @classmethod
    def check_places(cls, places: list[str]) -> list[str]:
        """Places must be non-empty, named and unique."""
        if not places:
            raise ValueError("at least one place is required")
        if any(not p for p in places):
            raise ValueError("place names must be non-empty")
        seen: set[str] = set()
        for place in places:
            if place in seen:
                raise ValueError(f"duplicate place '{place}'")
            seen.add(place)
        return places

    @model_validator(mode="after")
    def default_endpoints(self) -> "NetworkConfig":
        """Route from the first place to the last unless told otherwise."""
        if self.origin is None:
            self.origin = self.places[0]
        if self.destination is None:
            self.destination = self.places[-1]
        return self

    @model_validator(mode="after")
    def check_edges(self) -> "NetworkConfig":
        """Fixed edges must join two distinct known places, once per pair."""
        if self.edges is None:
            return self

        known = set(self.places)
        pairs: set[tuple[str, str]] = set()
        for edge in self.edges:
            for place in (edge.from_place, edge.to):
                if place not in known:
                    raise ValueError(f"edge references unknown place '{place}'")
            if edge.from_place == edge.to:
                raise ValueError(f"self-edge on '{edge.to}' is not allowed")
            pair = (edge.from_place, edge.to)
            if pair in pairs:
                raise ValueError(
                    f"duplicate edge from '{edge.from_place}' to '{edge.to}'"
                )
            pairs.add(pair)
        return self
