"""Minimum spanning tree over the transit network using Prim's algorithm.

The tree is always grown from handle 0, the first stop ever registered.
Only outgoing edges are followed, so stops reachable solely through
one-directional routes pointing at the tree stay outside it. Stops that
cannot be reached from the root are reported in ``unreached`` and the
result is flagged partial; no per-component forest is computed.
"""

import heapq
import math
from typing import List, Optional, Tuple

from ..domain.errors import EmptyGraphError
from ..domain.models import SpanningEdge, SpanningTreeResult
from .network import TransitNetwork

ROOT = 0


def minimum_spanning_tree(network: TransitNetwork) -> SpanningTreeResult:
    """Compute the minimum spanning tree rooted at the first stop.

    Returns:
        SpanningTreeResult with the edges in the order their destination
        was finalized and the running total weight.

    Raises:
        EmptyGraphError: If the network has no stops.
    """
    n = network.num_stops
    if n == 0:
        raise EmptyGraphError("No stops available to calculate MST")

    key: List[float] = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    in_tree: List[bool] = [False] * n
    key[ROOT] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, ROOT)]
    edges: List[SpanningEdge] = []
    total = 0.0

    while heap and len(edges) < n - 1:
        _, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True

        source = parent[u]
        if source is not None:
            total += key[u]
            edges.append(
                SpanningEdge(
                    source=network.name_of(source),
                    destination=network.name_of(u),
                    weight=key[u],
                )
            )

        for edge in network.edges_from(u):
            v = edge.destination
            if not in_tree[v] and edge.weight < key[v]:
                key[v] = edge.weight
                parent[v] = u
                heapq.heappush(heap, (edge.weight, v))

    # in_tree can miss the last node once n - 1 edges exist.
    reached = {ROOT} | {network.handle_of(e.destination) for e in edges}
    unreached = tuple(
        network.name_of(handle) for handle in range(n) if handle not in reached
    )

    return SpanningTreeResult(
        root=network.name_of(ROOT),
        edges=tuple(edges),
        total_weight=total,
        num_stops=n,
        unreached=unreached,
    )
