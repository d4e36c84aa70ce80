"""Color themes for frame rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Colors used by ``render_frame`` and ``render_filmstrip``."""

    name: str
    wall_color: str = "#1f3fbf"
    floor_color: str = "#000000"
    pellet_color: str = "#ffffff"
    power_pellet_color: str = "#ffb6c1"
    actor_color: str = "#ffd400"
    agent_colors: tuple[str, ...] = ("#e8272b", "#3fd8e8")
    frightened_color: str = "#bfbfbf"
    text_color: str = "#ffffff"
    figure_facecolor: str = "#000000"

    def agent_color(self, agent_id: int, frightened: bool) -> str:
        if frightened:
            return self.frightened_color
        return self.agent_colors[agent_id % len(self.agent_colors)]


DEFAULT_THEME = Theme(name="default")

PAPER_THEME = Theme(
    name="paper",
    wall_color="#4a4a4a",
    floor_color="#ffffff",
    pellet_color="#7f7f7f",
    power_pellet_color="#d62728",
    actor_color="#ff7f0e",
    agent_colors=("#1f77b4", "#2ca02c"),
    frightened_color="#c7c7c7",
    text_color="#000000",
    figure_facecolor="#ffffff",
)

REGISTERED_THEMES: dict[str, Theme] = {theme.name: theme for theme in (DEFAULT_THEME, PAPER_THEME)}


def get_theme(name: str) -> Theme:
    """Return a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError:
        raise ValueError(
            f"unknown theme {name!r}; expected one of {sorted(REGISTERED_THEMES)}"
        ) from None
