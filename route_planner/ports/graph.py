"""Graph ports - Abstractions for route loading and querying.

These protocols define the contracts for filling a transit network from
external data and for running queries over it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import LoadReport, PathResult, SpanningTreeResult
    from ..graph.network import TransitNetwork


class RouteLoaderPort(Protocol):
    """Port for bulk route ingestion.

    Implementation: adapters/graph/csv_loader.py
    """

    def load_into(
        self,
        network: TransitNetwork,
        path: Optional[Path] = None,
    ) -> LoadReport:
        """Insert every readable route into ``network``.

        Args:
            network: The network to fill.
            path: Source file; the configured default if omitted.

        Returns:
            LoadReport with loaded and skipped row counts.
        """
        ...


class PathSolverPort(Protocol):
    """Port for point-to-point queries.

    Implementations: DijkstraRouteSolver, BFSRouteSolver
    """

    def solve(self, network: TransitNetwork, start: str, end: str) -> PathResult:
        """Find a path, raising UnknownStopError or NoPathError."""
        ...

    def solve_safe(
        self, network: TransitNetwork, start: str, end: str
    ) -> PathResult:
        """Find a path, returning an empty result on failure."""
        ...


class SpanningTreeSolverPort(Protocol):
    """Port for whole-network connectivity summaries.

    Implementation: PrimSpanningTreeSolver
    """

    def solve(self, network: TransitNetwork) -> SpanningTreeResult:
        """Compute the spanning tree, raising EmptyGraphError on no stops."""
        ...
