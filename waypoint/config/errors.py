"""Errors raised while reading a network config."""

from pydantic import ValidationError


class ConfigError(Exception):
    """Base class for network config problems.

    ``source`` names where the config came from: a file path, or
    ``None`` for configs read from a string or stdin.
    """

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)

    @property
    def path(self) -> str | None:
        return self.source


class ConfigLoadError(ConfigError):
    """The config could not be read or is not a YAML mapping."""


class ConfigValidationError(ConfigError):
    """The config was read but describes an invalid network."""

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        source: str | None = None,
    ):
        self.errors = errors or []
        super().__init__(message, source)

    @classmethod
    def from_pydantic(
        cls, exc: ValidationError, source: str | None = None
    ) -> "ConfigValidationError":
        """Flatten a pydantic error into ``{"loc", "msg", "type"}`` entries."""
        errors = [
            {
                "loc": ".".join(str(part) for part in err["loc"]) or "(root)",
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        return cls(f"Network config has {len(errors)} problem(s)", errors, source)

    def describe(self) -> list[str]:
        """One ``loc: msg`` line per problem."""
        return [f"{err['loc']}: {err['msg']}" for err in self.errors]
