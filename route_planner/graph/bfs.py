"""Minimum-transfer search using breadth-first traversal.

Every edge counts as one hop regardless of its weight, so the returned
path minimises the number of stops travelled rather than the distance.
"""

from collections import deque
from typing import Deque, List, Optional

from ..domain.models import Edge, PathResult
from .network import TransitNetwork
from .paths import reconstruct_path

ALGORITHM = "bfs"


def min_transfers(network: TransitNetwork, start: str, end: str) -> PathResult:
    """Compute the path with the fewest hops between two stops.

    Returns:
        PathResult whose ``total`` is the hop count, or an empty result
        if ``end`` is unreachable.

    Raises:
        UnknownStopError: If either stop was never registered.
    """
    start_node = network.handle_of(start)
    end_node = network.handle_of(end)

    n = network.num_stops
    hops: List[int] = [-1] * n
    parent: List[Optional[int]] = [None] * n
    parent_edge: List[Optional[Edge]] = [None] * n
    hops[start_node] = 0

    queue: Deque[int] = deque([start_node])

    while queue:
        u = queue.popleft()
        if u == end_node:
            break

        for edge in network.edges_from(u):
            v = edge.destination
            # First visit is final.
            if hops[v] == -1:
                hops[v] = hops[u] + 1
                parent[v] = u
                parent_edge[v] = edge
                queue.append(v)

    if hops[end_node] == -1:
        return PathResult.empty(ALGORITHM, start, end)

    return reconstruct_path(
        network, ALGORITHM, start, end, end_node, parent, parent_edge, hops[end_node]
    )
