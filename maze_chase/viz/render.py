"""Matplotlib-based rendering of frame snapshots to static images."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap
from matplotlib.patches import Circle, Wedge

from maze_chase.domain.grid import CellKind
from maze_chase.domain.snapshot import ActorView, AgentView, FrameSnapshot
from maze_chase.domain.state import Phase
from maze_chase.viz.theme import DEFAULT_THEME, Theme

PHASE_LABELS: dict[Phase, str] = {
    Phase.RUNNING: "",
    Phase.WON: "You Won!",
    Phase.LOST: "Game Over",
}

ACTOR_RADIUS = 0.45
AGENT_RADIUS = 0.42


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------


def actor_heading_degrees(dx: int, dy: int) -> float:
    """Mouth heading in data coordinates, where +y points down the board.

    A stopped actor faces right.
    """
    return math.degrees(math.atan2(dy, dx)) % 360.0


def _draw_board(ax: plt.Axes, cells: np.ndarray, theme: Theme) -> None:
    """Walls and floor via imshow, pellets as scatter markers."""
    walls = (cells == int(CellKind.WALL)).astype(int)
    cmap = ListedColormap([theme.floor_color, theme.wall_color])
    ax.imshow(walls, cmap=cmap, vmin=0, vmax=1, origin="upper", interpolation="nearest")
    for kind, size, color in (
        (CellKind.PELLET, 6, theme.pellet_color),
        (CellKind.POWER_PELLET, 40, theme.power_pellet_color),
    ):
        ys, xs = np.nonzero(cells == int(kind))
        if len(xs):
            ax.scatter(xs, ys, s=size, c=color, marker="o", linewidths=0)
    ax.set_xticks([])
    ax.set_yticks([])


def _draw_actor(ax: plt.Axes, actor: ActorView, theme: Theme) -> None:
    heading = actor_heading_degrees(actor.dx, actor.dy)
    half_gap = actor.mouth_angle
    ax.add_patch(
        Wedge(
            (actor.x, actor.y),
            ACTOR_RADIUS,
            heading + half_gap,
            heading + 360.0 - half_gap,
            facecolor=theme.actor_color,
            edgecolor="none",
        )
    )


def _draw_agents(ax: plt.Axes, agents: Sequence[AgentView], theme: Theme) -> None:
    for agent in agents:
        ax.add_patch(
            Circle(
                (agent.x, agent.y),
                AGENT_RADIUS,
                facecolor=theme.agent_color(agent.agent_id, agent.frightened),
                edgecolor="none",
            )
        )


def draw_snapshot(ax: plt.Axes, snapshot: FrameSnapshot, theme: Theme = DEFAULT_THEME) -> None:
    """Draw one frame onto ``ax`` with a score/lives title."""
    _draw_board(ax, snapshot.cells, theme)
    _draw_actor(ax, snapshot.actor, theme)
    _draw_agents(ax, snapshot.agents, theme)
    title = f"Score: {snapshot.score}   Lives: {snapshot.lives}"
    label = PHASE_LABELS[snapshot.phase]
    if label:
        title = f"{label}  ({title})"
    ax.set_title(title, color=theme.text_color, fontsize=9)


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------


def render_frame(
    snapshot: FrameSnapshot,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 100,
) -> None:
    """Render a single frame to an image file."""
    fig, ax = plt.subplots(figsize=(5, 5.4))
    fig.set_facecolor(theme.figure_facecolor)
    draw_snapshot(ax, snapshot, theme)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_filmstrip(
    snapshots: Sequence[FrameSnapshot],
    output_path: Path,
    columns: int = 4,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 100,
) -> None:
    """Render frames left-to-right, top-to-bottom on one figure."""
    if not snapshots:
        raise ValueError("snapshots must not be empty")
    if columns < 1:
        raise ValueError("columns must be >= 1")
    n_cols = min(columns, len(snapshots))
    n_rows = math.ceil(len(snapshots) / n_cols)
    fig, axes = plt.subplots(
        n_rows, n_cols, figsize=(3 * n_cols, 3.2 * n_rows), squeeze=False
    )
    fig.set_facecolor(theme.figure_facecolor)
    for ax, snapshot in zip(axes.flat, snapshots, strict=False):
        draw_snapshot(ax, snapshot, theme)
        ax.set_xlabel(f"tick {snapshot.tick}", color=theme.text_color, fontsize=8)
    for ax in list(axes.flat)[len(snapshots):]:
        ax.axis("off")
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
