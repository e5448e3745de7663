"""In-memory transit network.

Stops are identified by name and assigned a dense, zero-based handle on
first mention. Handles index straight into the adjacency list, so the
handle space is always ``[0, num_stops)`` and never renumbered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from ..domain.errors import UnknownStopError
from ..domain.models import Edge, RouteListing, StopListing


@dataclass
class TransitNetwork:
    """Weighted, line-labelled directed graph of transit stops.

    Example:
        network = TransitNetwork()
        network.add_route("Central", "Harbour", 4.0, "Line1")
        network.handle_of("Harbour")  # -> 1
    """

    _handles: Dict[str, int] = field(default_factory=dict, repr=False)
    _names: List[str] = field(default_factory=list, repr=False)
    _adjacency: List[List[Edge]] = field(default_factory=list, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Identifier registry
    # ------------------------------------------------------------------

    def resolve_or_create(self, name: str) -> int:
        """Return the handle for ``name``, allocating the next one if unseen."""
        handle = self._handles.get(name)
        if handle is not None:
            return handle

        handle = len(self._names)
        self._handles[name] = handle
        self._names.append(name)
        self._adjacency.append([])
        self._logger.debug("Stop registered", extra={"stop": name, "handle": handle})
        return handle

    def handle_of(self, name: str) -> int:
        """Return the handle of a known stop.

        Raises:
            UnknownStopError: If the stop was never registered.
        """
        try:
            return self._handles[name]
        except KeyError:
            raise UnknownStopError(f"Stop not found: {name}", stop_name=name)

    def name_of(self, handle: int) -> str:
        return self._names[handle]

    def has_stop(self, name: str) -> bool:
        return name in self._handles

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __len__(self) -> int:
        return len(self._names)

    @property
    def num_stops(self) -> int:
        return len(self._names)

    @property
    def num_edges(self) -> int:
        return sum(len(edges) for edges in self._adjacency)

    @property
    def stop_names(self) -> Tuple[str, ...]:
        """Stop names in handle order."""
        return tuple(self._names)

    def edges_from(self, handle: int) -> Tuple[Edge, ...]:
        """Outgoing edges of a stop, in insertion order, as a snapshot."""
        return tuple(self._adjacency[handle])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_stop(self, name: str) -> int:
        handle = self.resolve_or_create(name)
        self._logger.info("Stop added", extra={"stop": name, "handle": handle})
        return handle

    def add_route(
        self,
        source: str,
        destination: str,
        weight: float,
        line: str,
        bidirectional: bool = True,
    ) -> None:
        """Insert a route, creating unknown endpoints.

        Duplicate routes are kept side by side; weights are not validated.
        """
        u = self.resolve_or_create(source)
        v = self.resolve_or_create(destination)

        self._adjacency[u].append(Edge(v, weight, line))
        if bidirectional:
            self._adjacency[v].append(Edge(u, weight, line))

        self._logger.debug(
            "Route added",
            extra={
                "source": source,
                "destination": destination,
                "weight": weight,
                "line": line,
                "bidirectional": bidirectional,
            },
        )

    def remove_route(
        self,
        source: str,
        destination: str,
        line: str = "",
        bidirectional: bool = True,
    ) -> int:
        """Remove at most one matching edge per direction.

        An empty ``line`` matches any line. Unknown endpoints are logged
        and leave the network untouched.

        Returns:
            The number of edges removed.
        """
        u = self._handles.get(source)
        v = self._handles.get(destination)
        if u is None or v is None:
            self._logger.warning(
                "One or both stops not found for route removal",
                extra={"source": source, "destination": destination},
            )
            return 0

        removed = self._remove_first(u, v, line)
        if bidirectional:
            removed += self._remove_first(v, u, line)

        self._logger.debug(
            "Route removed",
            extra={
                "source": source,
                "destination": destination,
                "line": line,
                "edges_removed": removed,
            },
        )
        return removed

    def _remove_first(self, u: int, v: int, line: str) -> int:
        edges = self._adjacency[u]
        for i, edge in enumerate(edges):
            if edge.destination == v and (not line or edge.line == line):
                del edges[i]
                return 1
        return 0

    # ------------------------------------------------------------------
    # Structural dump
    # ------------------------------------------------------------------

    def dump(self) -> Tuple[StopListing, ...]:
        """List every stop with its outgoing edges, in handle order."""
        return tuple(self._iter_listings())

    def _iter_listings(self) -> Iterator[StopListing]:
        for handle, name in enumerate(self._names):
            routes = tuple(
                RouteListing(
                    destination=self._names[edge.destination],
                    weight=edge.weight,
                    line=edge.line,
                )
                for edge in self._adjacency[handle]
            )
            yield StopListing(handle=handle, name=name, routes=routes)
