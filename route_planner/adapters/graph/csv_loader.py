"""CSV route loader adapter.

Reads ``source,destination,weight`` rows and inserts each one as a route
with a synthetic, sequential line label. The first line is a header.
Rows with a missing field are ignored; rows with broken quoting or a
weight that is not a number are skipped with a warning. Neither aborts
the load.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, MalformedRowError
from ...domain.models import LoadReport
from ...graph.network import TransitNetwork


@dataclass
class CSVRouteLoader:
    """Route loader that reads from a CSV file.

    This adapter implements RouteLoaderPort.

    Attributes:
        config: Graph configuration (data path, line label prefix)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_into(
        self,
        network: TransitNetwork,
        path: Optional[Path] = None,
    ) -> LoadReport:
        """Insert every parseable route of a CSV file into ``network``.

        Args:
            network: The network to fill.
            path: CSV file to read; ``config.routes_path`` if omitted.

        Returns:
            LoadReport with the number of routes inserted and the rows
            skipped for a malformed weight.

        Raises:
            GraphError: If the file cannot be read.
        """
        source = Path(path) if path is not None else self.config.routes_path

        self._logger.debug("Loading routes", extra={"path": str(source)})

        try:
            with source.open(newline="", encoding="utf-8") as f:
                lines = [line.rstrip("\r\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise GraphError(
                f"Could not open file {source}",
                file_path=str(source),
                cause=e,
            )

        if not lines:
            self._logger.warning("CSV file is empty", extra={"path": str(source)})
            return LoadReport(source=source)

        loaded = 0
        skipped: List[str] = []

        # Line 1 is the header. Each physical line is parsed on its own so
        # a broken row cannot swallow the rows after it.
        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            try:
                fields = self._split_row(self._parse_line(line, line_number))
                if fields is None:
                    continue
                weight = self._parse_weight(fields[2], line_number, line)
            except MalformedRowError as e:
                self._logger.warning(
                    "Skipping malformed route row",
                    extra={"line_number": e.line_number, "row": e.row},
                )
                skipped.append(e.row)
                continue

            loaded += 1
            network.add_route(
                fields[0],
                fields[1],
                weight,
                f"{self.config.line_prefix}{loaded}",
                self.config.bidirectional,
            )

        self._logger.info(
            "Routes loaded",
            extra={
                "path": str(source),
                "routes": loaded,
                "skipped": len(skipped),
                "stops": network.num_stops,
            },
        )
        return LoadReport(source=source, rows_loaded=loaded, skipped_rows=tuple(skipped))

    @staticmethod
    def _parse_line(line: str, line_number: int) -> List[str]:
        """Split one physical line into fields; bad quoting is malformed."""
        try:
            return next(csv.reader([line], strict=True), [])
        except csv.Error as e:
            raise MalformedRowError(
                f"Invalid quoting on line {line_number}",
                line_number=line_number,
                row=line,
                cause=e,
            )

    @staticmethod
    def _split_row(row: Sequence[str]) -> Optional[Tuple[str, str, str]]:
        """Trim a row into (source, destination, weight), or None if incomplete.

        Anything after the second comma belongs to the weight field.
        """
        if len(row) < 3:
            return None
        source = row[0].strip()
        destination = row[1].strip()
        weight = ",".join(row[2:]).strip()
        if not source or not destination or not weight:
            return None
        return source, destination, weight

    @staticmethod
    def _parse_weight(text: str, line_number: int, line: str) -> float:
        try:
            return float(text)
        except ValueError as e:
            raise MalformedRowError(
                f"Invalid weight on line {line_number}: {text!r}",
                line_number=line_number,
                row=line,
                cause=e,
            )
