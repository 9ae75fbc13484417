"""Graph-related exceptions."""


class GraphBuildError(ValueError):
    """Raised when places or edges cannot form a valid travel graph."""
