"""Rendering adapters - Implementations of ResultRendererPort.

Available implementations:
- TextRenderer: Plain-text console rendering
"""

from .text_renderer import TextRenderer

__all__ = ["TextRenderer"]
