"""Visualization layer: themes and static frame renderers."""

from maze_chase.viz.render import (
    actor_heading_degrees,
    draw_snapshot,
    render_filmstrip,
    render_frame,
)
from maze_chase.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "actor_heading_degrees",
    "draw_snapshot",
    "get_theme",
    "render_filmstrip",
    "render_frame",
]
