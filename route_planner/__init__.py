"""Top-level package for the Bus Route Planner project.

This package models a public-transit network as a weighted, labelled
graph and answers three routing queries over it: shortest path by total
weight, minimum-hop path, and a minimum spanning tree summary.
"""
