"""HTML export for generated puzzles."""

from .generator import generate_html, generate_visualizer, render_html

__all__ = ["generate_html", "generate_visualizer", "render_html"]
