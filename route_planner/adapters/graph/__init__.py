"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVRouteLoader: Loads routes from CSV files
- DijkstraRouteSolver: Shortest total-weight paths
- BFSRouteSolver: Fewest-hop paths
- PrimSpanningTreeSolver: Minimum spanning tree summaries
"""

from .csv_loader import CSVRouteLoader
from .solvers import BFSRouteSolver, DijkstraRouteSolver, PrimSpanningTreeSolver

__all__ = [
    "CSVRouteLoader",
    "DijkstraRouteSolver",
    "BFSRouteSolver",
    "PrimSpanningTreeSolver",
]
