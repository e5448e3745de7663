"""Typed domain errors for the route planner.

All errors inherit from RoutePlannerError and can optionally wrap a
root cause exception for debugging. None of them leaves the network in
a partially mutated state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoutePlannerError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownStopError(RoutePlannerError):
    """A referenced stop name was never registered.

    Attributes:
        stop_name: The name that could not be resolved
    """

    stop_name: str = ""


@dataclass
class NoPathError(RoutePlannerError):
    """The query endpoints are not connected.

    Attributes:
        start: Start stop name
        end: End stop name
    """

    start: str = ""
    end: str = ""


@dataclass
class EmptyGraphError(RoutePlannerError):
    """A whole-network query was requested with zero stops."""


@dataclass
class MalformedRowError(RoutePlannerError):
    """A bulk-load row could not be parsed.

    Attributes:
        line_number: 1-based line number in the source file
        row: The raw text of the row
    """

    line_number: int = 0
    row: str = ""


@dataclass
class GraphError(RoutePlannerError):
    """Route data could not be read.

    Attributes:
        file_path: Path to the route data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RoutePlannerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
