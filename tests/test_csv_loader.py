import logging
from pathlib import Path

import pytest

from route_planner.adapters.graph import CSVRouteLoader
from route_planner.config import GraphConfig
from route_planner.domain.errors import GraphError
from route_planner.domain.models import Edge
from route_planner.graph.network import TransitNetwork

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "routes.csv"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def loader(tmp_path) -> CSVRouteLoader:
    return CSVRouteLoader(GraphConfig(data_dir=tmp_path, routes_file="routes.csv"))


def test_loads_bidirectional_routes_with_sequential_lines(tmp_path, loader):
    path = _write(tmp_path, "source,destination,weight\nA,B,4\nB,C,3.5\n")
    network = TransitNetwork()

    report = loader.load_into(network, path)

    assert report.rows_loaded == 2
    assert report.rows_skipped == 0
    assert network.stop_names == ("A", "B", "C")
    assert network.edges_from(0) == (Edge(1, 4.0, "Line1"),)
    assert network.edges_from(1) == (Edge(0, 4.0, "Line1"), Edge(2, 3.5, "Line2"))


def test_uses_configured_path_by_default(tmp_path, loader):
    _write(tmp_path, "source,destination,weight\nA,B,1\n")
    network = TransitNetwork()

    report = loader.load_into(network)

    assert report.source == tmp_path / "routes.csv"
    assert report.rows_loaded == 1


def test_trims_whitespace_and_ignores_blank_lines(tmp_path, loader):
    path = _write(tmp_path, "source,destination,weight\n\n  A , B ,  2.0 \n\n")
    network = TransitNetwork()

    loader.load_into(network, path)

    assert network.stop_names == ("A", "B")
    assert network.edges_from(0) == (Edge(1, 2.0, "Line1"),)


def test_skips_malformed_weight_and_keeps_going(tmp_path, loader, caplog):
    path = _write(tmp_path, "source,destination,weight\nA,B,abc\nB,C,2\n")
    network = TransitNetwork()

    with caplog.at_level(logging.WARNING):
        report = loader.load_into(network, path)

    assert report.rows_loaded == 1
    assert report.skipped_rows == ("A,B,abc",)
    assert "Skipping malformed route row" in caplog.text
    # Skipped rows do not consume a line label.
    assert network.edges_from(network.handle_of("B")) == (
        Edge(network.handle_of("C"), 2.0, "Line1"),
    )
    assert "A" not in network


def test_skips_incomplete_rows_silently(tmp_path, loader):
    path = _write(tmp_path, "source,destination,weight\nA,B\n,B,3\nA,,3\nA,B,\n")
    network = TransitNetwork()

    report = loader.load_into(network, path)

    assert report.rows_loaded == 0
    assert report.rows_skipped == 0
    assert network.num_stops == 0


def test_extra_fields_are_part_of_the_weight(tmp_path, loader):
    path = _write(tmp_path, "source,destination,weight\nA,B,4,express\n")
    network = TransitNetwork()

    report = loader.load_into(network, path)

    assert report.skipped_rows == ("A,B,4,express",)


def test_unclosed_quote_only_skips_its_own_line(tmp_path, loader, caplog):
    path = _write(tmp_path, 'source,destination,weight\nA,"B,4\nC,D,5\nE,F,6\n')
    network = TransitNetwork()

    with caplog.at_level(logging.WARNING):
        report = loader.load_into(network, path)

    assert report.rows_loaded == 2
    assert report.skipped_rows == ('A,"B,4',)
    assert "C" in network and "F" in network
    assert "A" not in network
    assert network.edges_from(network.handle_of("C"))[0].line == "Line1"
    warnings = [r for r in caplog.records if r.getMessage() == "Skipping malformed route row"]
    assert [r.line_number for r in warnings] == [2]


def test_line_numbers_count_physical_lines(tmp_path, loader, caplog):
    path = _write(tmp_path, "source,destination,weight\n\nA,B,1\n\nC,D,oops\n")

    with caplog.at_level(logging.WARNING):
        loader.load_into(TransitNetwork(), path)

    warnings = [r for r in caplog.records if r.getMessage() == "Skipping malformed route row"]
    assert [r.line_number for r in warnings] == [5]


def test_empty_file_loads_nothing(tmp_path, loader, caplog):
    path = _write(tmp_path, "")
    network = TransitNetwork()

    with caplog.at_level(logging.WARNING):
        report = loader.load_into(network, path)

    assert report.rows_loaded == 0
    assert network.num_stops == 0
    assert "CSV file is empty" in caplog.text


def test_missing_file_raises_graph_error(tmp_path, loader):
    missing = tmp_path / "nope.csv"

    with pytest.raises(GraphError) as excinfo:
        loader.load_into(TransitNetwork(), missing)

    assert excinfo.value.file_path == str(missing)
    assert isinstance(excinfo.value.cause, OSError)


def test_one_way_loading_from_config(tmp_path):
    loader = CSVRouteLoader(GraphConfig(data_dir=tmp_path, bidirectional=False))
    path = _write(tmp_path, "source,destination,weight\nA,B,1\n")
    network = TransitNetwork()

    loader.load_into(network, path)

    assert network.num_edges == 1


def test_custom_line_prefix(tmp_path):
    loader = CSVRouteLoader(GraphConfig(data_dir=tmp_path, line_prefix="Bus "))
    path = _write(tmp_path, "source,destination,weight\nA,B,1\n")
    network = TransitNetwork()

    loader.load_into(network, path)

    assert network.edges_from(0)[0].line == "Bus 1"


def test_bundled_routes_file_loads():
    loader = CSVRouteLoader(GraphConfig(data_dir=DATA_DIR))
    network = TransitNetwork()

    report = loader.load_into(network)

    assert report.rows_loaded > 0
    assert report.rows_skipped == 0
    assert "Central Station" in network
