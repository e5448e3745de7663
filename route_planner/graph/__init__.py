"""Graph engine for the transit network.

This subpackage holds the in-memory network (stop registry and
adjacency lists) and the three queries run on top of it: shortest path,
minimum transfers and minimum spanning tree.
"""

from .bfs import min_transfers
from .dijkstra import dijkstra
from .network import TransitNetwork
from .prim import minimum_spanning_tree

__all__ = ["TransitNetwork", "dijkstra", "min_transfers", "minimum_spanning_tree"]
