"""Rendering port - Abstraction for presenting query results.

The engine returns structured data only; renderers turn it into text for
whichever front-end is driving the planner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import (
        LoadReport,
        PathResult,
        SpanningTreeResult,
        StopListing,
    )


class ResultRendererPort(Protocol):
    """Port for result rendering.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render_network(self, listings: Sequence[StopListing]) -> str:
        ...

    def render_path(self, result: PathResult) -> str:
        ...

    def render_spanning_tree(self, result: SpanningTreeResult) -> str:
        ...

    def render_load_report(self, report: LoadReport) -> str:
        ...
