"""Route solver adapters.

These adapters wrap the graph engine's search functions and add:
- Typed errors for missing paths
- A non-raising variant for front-ends
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import EmptyGraphError, NoPathError, UnknownStopError
from ...domain.models import PathResult, SpanningTreeResult
from ...graph.bfs import min_transfers
from ...graph.dijkstra import dijkstra
from ...graph.network import TransitNetwork
from ...graph.prim import minimum_spanning_tree


@dataclass
class _SearchSolver:
    """Shared solve/solve_safe behaviour for point-to-point searches."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        raise NotImplementedError

    def _search(self, network: TransitNetwork, start: str, end: str) -> PathResult:
        raise NotImplementedError

    def solve(self, network: TransitNetwork, start: str, end: str) -> PathResult:
        """Find a path between two stops.

        Args:
            network: The transit network.
            start: Start stop name.
            end: End stop name.

        Returns:
            PathResult with stops, lines and total.

        Raises:
            UnknownStopError: If either stop is not in the network.
            NoPathError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"algorithm": self.name, "start": start, "end": end},
        )

        result = self._search(network, start, end)

        if result.is_empty:
            self._logger.warning(
                "No route found",
                extra={"algorithm": self.name, "start": start, "end": end},
            )
            raise NoPathError(
                f"No path found from {start} to {end}",
                start=start,
                end=end,
            )

        self._logger.info(
            "Route found",
            extra={
                "algorithm": self.name,
                "start": start,
                "end": end,
                "stops": len(result.stops),
                "total": result.total,
            },
        )
        return result

    def solve_safe(self, network: TransitNetwork, start: str, end: str) -> PathResult:
        """Find a path, returning an empty result instead of raising."""
        try:
            return self.solve(network, start, end)
        except UnknownStopError as e:
            self._logger.warning(
                "Start or end stop not found",
                extra={"algorithm": self.name, "stop": e.stop_name},
            )
            return PathResult.empty(self.name, start, end)
        except NoPathError:
            return PathResult.empty(self.name, start, end)


@dataclass
class DijkstraRouteSolver(_SearchSolver):
    """Shortest total-weight routes, implements PathSolverPort."""

    @property
    def name(self) -> str:
        return "dijkstra"

    def _search(self, network: TransitNetwork, start: str, end: str) -> PathResult:
        return dijkstra(network, start, end)


@dataclass
class BFSRouteSolver(_SearchSolver):
    """Fewest-hop routes, implements PathSolverPort."""

    @property
    def name(self) -> str:
        return "bfs"

    def _search(self, network: TransitNetwork, start: str, end: str) -> PathResult:
        return min_transfers(network, start, end)


@dataclass
class PrimSpanningTreeSolver:
    """Minimum spanning tree summaries, implements SpanningTreeSolverPort."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, network: TransitNetwork) -> SpanningTreeResult:
        """Compute the spanning tree rooted at the first registered stop.

        Raises:
            EmptyGraphError: If the network has no stops.
        """
        try:
            result = minimum_spanning_tree(network)
        except EmptyGraphError:
            self._logger.warning("No stops available to calculate MST")
            raise

        if result.is_partial:
            self._logger.warning(
                "Graph might not be fully connected",
                extra={
                    "edges_added": result.edges_added,
                    "num_stops": result.num_stops,
                    "unreached": len(result.unreached),
                    "partial_weight": result.total_weight,
                },
            )
        else:
            self._logger.info(
                "Spanning tree computed",
                extra={
                    "edges_added": result.edges_added,
                    "total_weight": result.total_weight,
                },
            )
        return result
