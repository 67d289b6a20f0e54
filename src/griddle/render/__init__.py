"""Renderers for drawing buffers on displays."""

from griddle.render.diff import DiffRenderer, RenderStats, render, render_to_string

__all__ = ["DiffRenderer", "RenderStats", "render", "render_to_string"]
