"""Shortest-path computation using Dijkstra's algorithm.

This module computes the minimum total-weight path between two stops
of a ``TransitNetwork``. Weights are assumed non-negative; negative
weights give undefined results.
"""

import heapq
import math
from typing import List, Optional, Tuple

from ..domain.models import Edge, PathResult
from .network import TransitNetwork
from .paths import reconstruct_path

ALGORITHM = "dijkstra"


def dijkstra(network: TransitNetwork, start: str, end: str) -> PathResult:
    """Compute the shortest path between two stops.

    Parameters
    ----------
    network:
        Transit network to search.
    start:
        Name of the departure stop.
    end:
        Name of the arrival stop.

    Returns
    -------
    PathResult
        Stop sequence, per-hop lines and weights, and the total distance.
        If no path exists, an empty result with an infinite total.

    Raises
    ------
    UnknownStopError
        If either stop was never registered.
    """
    start_node = network.handle_of(start)
    end_node = network.handle_of(end)

    n = network.num_stops
    dist: List[float] = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    parent_edge: List[Optional[Edge]] = [None] * n
    dist[start_node] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, start_node)]

    while heap:
        d, u = heapq.heappop(heap)

        # Stale entry, a shorter distance was already settled.
        if d > dist[u]:
            continue

        if u == end_node:
            break

        for edge in network.edges_from(u):
            v = edge.destination
            candidate = d + edge.weight
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                parent_edge[v] = edge
                heapq.heappush(heap, (candidate, v))

    if math.isinf(dist[end_node]):
        return PathResult.empty(ALGORITHM, start, end)

    return reconstruct_path(
        network, ALGORITHM, start, end, end_node, parent, parent_edge, dist[end_node]
    )
