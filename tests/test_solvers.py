"""Tests for the route solver adapters."""

import logging
import math

import pytest

from route_planner.adapters.graph import (
    BFSRouteSolver,
    DijkstraRouteSolver,
    PrimSpanningTreeSolver,
)
from route_planner.domain.errors import EmptyGraphError, NoPathError, UnknownStopError
from route_planner.graph.network import TransitNetwork


@pytest.fixture
def network() -> TransitNetwork:
    network = TransitNetwork()
    network.add_route("A", "B", 4.0, "L1")
    network.add_route("B", "C", 3.0, "L2")
    network.add_route("A", "C", 10.0, "L3")
    network.add_route("C", "D", 2.0, "L4")
    network.add_stop("Island")
    return network


class TestDijkstraRouteSolver:
    def test_solve_returns_shortest_path(self, network):
        result = DijkstraRouteSolver().solve(network, "A", "D")

        assert result.algorithm == "dijkstra"
        assert result.stops == ("A", "B", "C", "D")
        assert result.total == 9.0

    def test_solve_raises_when_unreachable(self, network, caplog):
        with caplog.at_level(logging.WARNING):
            with pytest.raises(NoPathError) as excinfo:
                DijkstraRouteSolver().solve(network, "A", "Island")

        assert excinfo.value.start == "A"
        assert excinfo.value.end == "Island"
        assert "No route found" in caplog.text

    def test_solve_raises_for_unknown_stop(self, network):
        with pytest.raises(UnknownStopError):
            DijkstraRouteSolver().solve(network, "A", "Ghost")

    def test_solve_safe_returns_empty_result(self, network):
        solver = DijkstraRouteSolver()

        unreachable = solver.solve_safe(network, "A", "Island")
        unknown = solver.solve_safe(network, "Ghost", "A")

        assert unreachable.is_empty and math.isinf(unreachable.total)
        assert unknown.is_empty
        assert unknown.algorithm == "dijkstra"


class TestBFSRouteSolver:
    def test_solve_returns_fewest_hops(self, network):
        result = BFSRouteSolver().solve(network, "A", "D")

        assert result.algorithm == "bfs"
        assert result.hops == 2

    def test_solve_raises_for_unknown_stop(self, network):
        with pytest.raises(UnknownStopError):
            BFSRouteSolver().solve(network, "Ghost", "A")

    def test_solve_safe_returns_empty_result(self, network):
        assert BFSRouteSolver().solve_safe(network, "D", "Island").is_empty


class TestPrimSpanningTreeSolver:
    def test_partial_tree_is_logged(self, network, caplog):
        with caplog.at_level(logging.WARNING):
            result = PrimSpanningTreeSolver().solve(network)

        assert result.is_partial
        assert result.unreached == ("Island",)
        assert result.total_weight == 9.0
        assert "Graph might not be fully connected" in caplog.text

    def test_empty_network_raises(self):
        with pytest.raises(EmptyGraphError):
            PrimSpanningTreeSolver().solve(TransitNetwork())
