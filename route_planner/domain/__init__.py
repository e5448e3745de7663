"""Domain layer - Core models and errors.

This module contains immutable result models and typed errors used
throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EmptyGraphError,
    GraphError,
    MalformedRowError,
    NoPathError,
    RoutePlannerError,
    UnknownStopError,
)
from .models import (
    Edge,
    LoadReport,
    PathResult,
    QueryKind,
    RouteListing,
    SpanningEdge,
    SpanningTreeResult,
    StopListing,
)

__all__ = [
    # Models
    "Edge",
    "PathResult",
    "QueryKind",
    "SpanningEdge",
    "SpanningTreeResult",
    "RouteListing",
    "StopListing",
    "LoadReport",
    # Errors
    "RoutePlannerError",
    "UnknownStopError",
    "NoPathError",
    "EmptyGraphError",
    "MalformedRowError",
    "GraphError",
    "ConfigurationError",
]
