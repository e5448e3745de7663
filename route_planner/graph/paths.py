"""Path reconstruction shared by the point-to-point searches."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..domain.models import Edge, PathResult
from .network import TransitNetwork


def reconstruct_path(
    network: TransitNetwork,
    algorithm: str,
    start: str,
    end: str,
    end_node: int,
    parent: Sequence[Optional[int]],
    parent_edge: Sequence[Optional[Edge]],
    total: float,
) -> PathResult:
    """Walk predecessor links back from ``end_node`` and reverse them.

    ``parent_edge[v]`` is the edge used to reach ``v`` from ``parent[v]``.
    """
    stops: List[str] = []
    lines: List[str] = []
    weights: List[float] = []

    current: Optional[int] = end_node
    while current is not None:
        stops.append(network.name_of(current))
        edge = parent_edge[current]
        if edge is not None:
            lines.append(edge.line)
            weights.append(edge.weight)
        current = parent[current]

    stops.reverse()
    lines.reverse()
    weights.reverse()

    return PathResult(
        algorithm=algorithm,
        start=start,
        end=end,
        stops=tuple(stops),
        lines=tuple(lines),
        weights=tuple(weights),
        total=total,
    )
