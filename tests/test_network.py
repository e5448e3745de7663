import logging

import pytest

from route_planner.domain.errors import UnknownStopError
from route_planner.domain.models import Edge, RouteListing, StopListing
from route_planner.graph.network import TransitNetwork


def test_handles_are_dense_and_sequential():
    network = TransitNetwork()

    assert network.resolve_or_create("A") == 0
    assert network.resolve_or_create("B") == 1
    assert network.resolve_or_create("C") == 2
    assert network.num_stops == 3
    assert network.stop_names == ("A", "B", "C")


def test_resolve_or_create_is_idempotent():
    network = TransitNetwork()
    network.add_route("A", "B", 1.0, "L1")
    network.add_route("B", "C", 1.0, "L2")
    network.add_route("C", "A", 1.0, "L3")

    for name in ("A", "B", "C"):
        first = network.resolve_or_create(name)
        assert network.resolve_or_create(name) == first
        assert network.handle_of(name) == first
        assert network.name_of(first) == name

    assert len(network) == 3


def test_add_route_creates_unknown_endpoints():
    network = TransitNetwork()
    network.add_route("Depot", "Harbour", 3.5, "L1")

    assert "Depot" in network
    assert network.has_stop("Harbour")
    assert not network.has_stop("Airport")


def test_bidirectional_route_adds_two_edges():
    network = TransitNetwork()
    network.add_route("A", "B", 4.0, "L1")

    assert network.edges_from(0) == (Edge(1, 4.0, "L1"),)
    assert network.edges_from(1) == (Edge(0, 4.0, "L1"),)
    assert network.num_edges == 2


def test_one_way_route_adds_single_edge():
    network = TransitNetwork()
    network.add_route("A", "B", 4.0, "L1", bidirectional=False)

    assert network.edges_from(0) == (Edge(1, 4.0, "L1"),)
    assert network.edges_from(1) == ()


def test_duplicate_routes_coexist():
    network = TransitNetwork()
    network.add_route("A", "B", 4.0, "L1")
    network.add_route("A", "B", 4.0, "L1")

    assert network.num_edges == 4


def test_edges_from_cannot_change_adjacency():
    network = TransitNetwork()
    network.add_route("A", "B", 4.0, "L1")

    edges = network.edges_from(0)

    with pytest.raises(AttributeError):
        edges.append(Edge(0, 1.0, "Rogue"))  # type: ignore[attr-defined]
    assert network.edges_from(0) == (Edge(1, 4.0, "L1"),)
    assert network.num_edges == 2


def test_handle_of_unknown_stop_raises():
    network = TransitNetwork()

    with pytest.raises(UnknownStopError) as excinfo:
        network.handle_of("Nowhere")

    assert excinfo.value.stop_name == "Nowhere"


def test_add_stop_without_routes():
    network = TransitNetwork()

    assert network.add_stop("Lonely") == 0
    assert network.add_stop("Lonely") == 0
    assert network.num_stops == 1
    assert network.edges_from(0) == ()


class TestRemoveRoute:
    def test_removes_both_directions(self):
        network = TransitNetwork()
        network.add_route("A", "B", 1.0, "L1")

        assert network.remove_route("A", "B", "L1") == 2
        assert network.num_edges == 0

    def test_one_direction_only(self):
        network = TransitNetwork()
        network.add_route("A", "B", 1.0, "L1")

        assert network.remove_route("A", "B", "L1", bidirectional=False) == 1
        assert network.edges_from(0) == ()
        assert network.edges_from(1) == (Edge(0, 1.0, "L1"),)

    def test_removes_only_first_duplicate(self):
        network = TransitNetwork()
        network.add_route("A", "B", 1.0, "L1")
        network.add_route("A", "B", 2.0, "L1")

        network.remove_route("A", "B", "L1")

        assert network.edges_from(0) == (Edge(1, 2.0, "L1"),)
        assert network.edges_from(1) == (Edge(0, 2.0, "L1"),)

    def test_line_must_match(self):
        network = TransitNetwork()
        network.add_route("A", "B", 1.0, "L1")
        network.add_route("A", "B", 5.0, "L2")

        network.remove_route("A", "B", "L2")

        assert network.edges_from(0) == (Edge(1, 1.0, "L1"),)

    def test_empty_line_matches_any(self):
        network = TransitNetwork()
        network.add_route("A", "B", 1.0, "L7")

        assert network.remove_route("A", "B") == 2

    def test_missing_reverse_edge_is_not_an_error(self):
        network = TransitNetwork()
        network.add_route("A", "B", 1.0, "L1", bidirectional=False)

        assert network.remove_route("A", "B", "L1") == 1

    def test_unknown_stop_is_reported_without_mutation(self, caplog):
        network = TransitNetwork()
        network.add_route("A", "B", 1.0, "L1")

        with caplog.at_level(logging.WARNING):
            removed = network.remove_route("A", "Ghost", "L1")

        assert removed == 0
        assert network.num_edges == 2
        assert network.num_stops == 2
        assert "not found for route removal" in caplog.text


def test_dump_lists_edges_in_adjacency_order():
    network = TransitNetwork()
    network.add_route("A", "B", 4.0, "L1")
    network.add_route("A", "C", 10.0, "L2", bidirectional=False)
    network.add_stop("D")

    assert network.dump() == (
        StopListing(
            handle=0,
            name="A",
            routes=(RouteListing("B", 4.0, "L1"), RouteListing("C", 10.0, "L2")),
        ),
        StopListing(handle=1, name="B", routes=(RouteListing("A", 4.0, "L1"),)),
        StopListing(handle=2, name="C", routes=()),
        StopListing(handle=3, name="D", routes=()),
    )


def test_dump_does_not_mutate():
    network = TransitNetwork()
    network.add_route("A", "B", 4.0, "L1")

    network.dump()

    assert network.num_edges == 2
    assert network.num_stops == 2
