"""Renderers for outputting colored strings."""

from fmtstring.render.terminal import OptimisedRenderer
from fmtstring.render.text import TextRenderer

__all__ = ["OptimisedRenderer", "TextRenderer"]
