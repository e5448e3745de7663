"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph engine to:
- Route storage (CSV files)
- Query algorithms (Dijkstra, BFS, Prim)
- Text rendering for console front-ends
"""
