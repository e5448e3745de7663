"""Route planner service - Main orchestrator.

This service owns the transit network and routes every mutation and
query through the injected loader and solvers, so front-ends never
touch the graph engine directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

from ..domain.errors import ConfigurationError, NoPathError, UnknownStopError
from ..domain.models import (
    LoadReport,
    PathResult,
    QueryKind,
    SpanningTreeResult,
    StopListing,
)
from ..graph.network import TransitNetwork
from ..ports.graph import PathSolverPort, RouteLoaderPort, SpanningTreeSolverPort


@dataclass
class RoutePlannerService:
    """Main service for planning routes over a transit network.

    Attributes:
        loader: Bulk route ingestion
        path_solver: Shortest total-weight paths
        transfer_solver: Fewest-hop paths
        tree_solver: Minimum spanning tree
        network: The network being planned over
    """

    loader: RouteLoaderPort
    path_solver: PathSolverPort
    transfer_solver: PathSolverPort
    tree_solver: SpanningTreeSolverPort
    network: TransitNetwork = field(default_factory=TransitNetwork)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_routes(self, path: Optional[Union[str, Path]] = None) -> LoadReport:
        """Bulk-load routes into the network.

        Raises:
            GraphError: If the source cannot be read.
        """
        report = self.loader.load_into(
            self.network, Path(path) if path is not None else None
        )
        self._logger.info(
            "Routes ingested",
            extra={"loaded": report.rows_loaded, "skipped": report.rows_skipped},
        )
        return report

    def add_stop(self, name: str) -> int:
        return self.network.add_stop(name)

    def add_route(
        self,
        source: str,
        destination: str,
        weight: float,
        line: str,
        bidirectional: bool = True,
    ) -> None:
        self.network.add_route(source, destination, weight, line, bidirectional)

    def remove_route(
        self,
        source: str,
        destination: str,
        line: str = "",
        bidirectional: bool = True,
    ) -> int:
        return self.network.remove_route(source, destination, line, bidirectional)

    def shortest_path(self, start: str, end: str) -> PathResult:
        """Raises UnknownStopError or NoPathError."""
        return self.path_solver.solve(self.network, start, end)

    def min_transfers(self, start: str, end: str) -> PathResult:
        """Raises UnknownStopError or NoPathError."""
        return self.transfer_solver.solve(self.network, start, end)

    def spanning_tree(self) -> SpanningTreeResult:
        """Raises EmptyGraphError when no stops exist."""
        return self.tree_solver.solve(self.network)

    def network_dump(self) -> Tuple[StopListing, ...]:
        return self.network.dump()

    def query_safe(
        self,
        kind: Union[QueryKind, str],
        start: str,
        end: str,
    ) -> Tuple[Optional[PathResult], Optional[str]]:
        """Run a path query, returning an error message instead of raising.

        Args:
            kind: Which query to run.
            start: Start stop name.
            end: End stop name.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            query = QueryKind(kind)
        except ValueError:
            error = ConfigurationError(
                f"Unknown query kind: {kind!r}", setting_name="kind"
            )
            return None, f"Error: {error.message}"

        try:
            if query is QueryKind.SHORTEST_PATH:
                return self.shortest_path(start, end), None
            return self.min_transfers(start, end), None
        except UnknownStopError as e:
            return None, f"Error: {e.message}"
        except NoPathError as e:
            return None, f"No path found from {e.start} to {e.end}."
