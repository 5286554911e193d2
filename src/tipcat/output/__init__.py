"""Text output: renderer and shared formatting helpers."""

from .renderer import parse_json, render_all, render_one, supported_formats

__all__ = ["parse_json", "render_all", "render_one", "supported_formats"]
