"""Plain-text renderer for console front-ends.

Produces the same layout the interactive planner has always printed:
adjacency listings, arrowed paths with line labels, and the list of
spanning tree edges followed by the total weight.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ...domain.models import LoadReport, PathResult, SpanningTreeResult, StopListing

RULE = "-" * 57

TITLES = {
    "dijkstra": "Shortest Path (Dijkstra)",
    "bfs": "Path with Minimum Transfers (BFS)",
}


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class TextRenderer:
    """Text renderer, implements ResultRendererPort."""

    def render_network(self, listings: Sequence[StopListing]) -> str:
        lines = ["", "--- Current Bus Network ---"]
        for stop in listings:
            routes = " ".join(
                f"-> {route.destination} (W:{_fmt(route.weight)}, L:{route.line})"
                for route in stop.routes
            )
            lines.append(f"{stop.name} (ID: {stop.handle}): {routes}".rstrip())
        lines.append("-" * 27)
        return "\n".join(lines)

    def render_path(self, result: PathResult) -> str:
        if result.is_empty:
            return f"No path found from {result.start} to {result.end}."

        weighted = result.algorithm == "dijkstra"
        title = TITLES.get(result.algorithm, result.algorithm)

        parts: List[str] = []
        for i, stop in enumerate(result.stops):
            parts.append(stop)
            if i < len(result.lines):
                label = result.lines[i]
                if weighted:
                    label = f"{label}, {_fmt(result.weights[i])}"
                parts.append(f" --({label})--> ")

        if weighted:
            total = f"Total Distance: {_fmt(result.total)}"
        else:
            total = f"Total Transfers: {result.hops}"

        return "\n".join(
            [
                "",
                f"--- {title} from {result.start} to {result.end} ---",
                "".join(parts),
                total,
                RULE,
            ]
        )

    def render_spanning_tree(self, result: SpanningTreeResult) -> str:
        lines = [
            f"Added edge: {edge.source} - {edge.destination} (Weight: {_fmt(edge.weight)})"
            for edge in result.edges
        ]
        if result.is_partial:
            lines.append(
                "Warning: Graph might not be fully connected. "
                f"Partial MST weight: {_fmt(result.total_weight)}"
            )
            lines.append(f"Unreached stops: {', '.join(result.unreached)}")
        else:
            lines.append(f"Total MST Weight: {_fmt(result.total_weight)}")
        lines.append(RULE)
        return "\n".join(lines)

    def render_load_report(self, report: LoadReport) -> str:
        message = f"Routes successfully loaded from {report.source}"
        if report.rows_skipped:
            message += f" ({report.rows_loaded} loaded, {report.rows_skipped} skipped)"
        return message
