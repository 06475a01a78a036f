from __future__ import annotations


class GraphError(Exception):
    """Base class for errors raised while configuring or rendering a graph."""


class ConfigurationError(GraphError, ValueError):
    pass


class ShapeMismatchError(GraphError, IndexError):
    pass
