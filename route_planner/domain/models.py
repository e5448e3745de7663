"""Immutable domain models for the route planner.

All models are frozen dataclasses with slots. Queries return these
instead of printing, so callers decide how results are rendered.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from itertools import accumulate
from pathlib import Path
from typing import Optional


class QueryKind(Enum):
    """Named path queries a driver can issue."""

    SHORTEST_PATH = "shortest_path"
    MIN_TRANSFERS = "min_transfers"


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted, line-labelled arc owned by its source stop.

    Attributes:
        destination: Handle of the stop the arc leads to
        weight: Distance or cost of travelling the arc
        line: Label of the service operating the arc
    """

    destination: int
    weight: float
    line: str


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a point-to-point query.

    An empty ``stops`` tuple means no path exists between the endpoints.

    Attributes:
        algorithm: Name of the algorithm that produced the result
        start: Requested start stop
        end: Requested end stop
        stops: Ordered stop names from start to end (inclusive)
        lines: Line label used on each hop
        weights: Edge weight of each hop
        total: Total distance for weighted queries, hop count for BFS
    """

    algorithm: str
    start: str
    end: str
    stops: tuple[str, ...] = field(default_factory=tuple)
    lines: tuple[str, ...] = field(default_factory=tuple)
    weights: tuple[float, ...] = field(default_factory=tuple)
    total: float = math.inf

    @classmethod
    def empty(cls, algorithm: str, start: str, end: str) -> PathResult:
        """Build the result reported when no path exists."""
        return cls(algorithm=algorithm, start=start, end=end)

    @property
    def found(self) -> bool:
        return len(self.stops) > 0

    @property
    def is_empty(self) -> bool:
        return not self.found

    @property
    def hops(self) -> int:
        """Number of edges travelled."""
        return max(len(self.stops) - 1, 0)


@dataclass(frozen=True, slots=True)
class SpanningEdge:
    """One edge added to the minimum spanning tree."""

    source: str
    destination: str
    weight: float


@dataclass(frozen=True, slots=True)
class SpanningTreeResult:
    """Result of a minimum spanning tree computation.

    Attributes:
        root: Name of the stop the tree was grown from
        edges: Edges in the order their destination was finalized
        total_weight: Sum of all edge weights
        num_stops: Number of stops known when the tree was computed
        unreached: Stops never reached from the root
    """

    root: str
    edges: tuple[SpanningEdge, ...]
    total_weight: float
    num_stops: int
    unreached: tuple[str, ...] = field(default_factory=tuple)

    @property
    def edges_added(self) -> int:
        return len(self.edges)

    @property
    def is_partial(self) -> bool:
        """True when the tree does not span every known stop."""
        return self.edges_added < self.num_stops - 1

    @property
    def running_totals(self) -> tuple[float, ...]:
        """Cumulative tree weight after each edge was added."""
        return tuple(accumulate(edge.weight for edge in self.edges))


@dataclass(frozen=True, slots=True)
class RouteListing:
    """An outgoing edge as shown in the structural dump."""

    destination: str
    weight: float
    line: str


@dataclass(frozen=True, slots=True)
class StopListing:
    """A stop and its outgoing edges, in adjacency order."""

    handle: int
    name: str
    routes: tuple[RouteListing, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class LoadReport:
    """Outcome of a bulk route load.

    Attributes:
        source: File the routes were read from
        rows_loaded: Number of routes inserted
        skipped_rows: Raw text of rows skipped for a bad weight
    """

    source: Optional[Path]
    rows_loaded: int = 0
    skipped_rows: tuple[str, ...] = field(default_factory=tuple)

    @property
    def rows_skipped(self) -> int:
        return len(self.skipped_rows)
