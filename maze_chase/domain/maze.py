"""Maze topology checks on the walkable-cell graph.

The tick loop relies on two properties of the fixed template that no code path
enforces at runtime: the border is fully walled, so agent moves never leave the
grid, and every pellet is reachable from the actor spawn, so the game is
winnable. ``validate_maze`` checks both.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from maze_chase.domain.grid import CellKind, Grid

Cell = tuple[int, int]


def walkable_graph(grid: Grid) -> nx.Graph:
    """Return the 4-connected graph of non-wall cells, nodes keyed ``(x, y)``."""
    g = nx.Graph()
    for y in range(grid.height):
        for x in range(grid.width):
            if not grid.is_walkable(x, y):
                continue
            g.add_node((x, y), kind=grid.kind_at(x, y))
            # Right and down neighbours cover every edge exactly once
            for nx_, ny_ in ((x + 1, y), (x, y + 1)):
                if grid.is_walkable(nx_, ny_):
                    g.add_edge((x, y), (nx_, ny_))
    return g


def border_openings(grid: Grid) -> list[Cell]:
    """Return border cells that are not walls."""
    openings: list[Cell] = []
    for y in range(grid.height):
        for x in range(grid.width):
            on_border = x in (0, grid.width - 1) or y in (0, grid.height - 1)
            if on_border and grid.kind_at(x, y) is not CellKind.WALL:
                openings.append((x, y))
    return openings


def unreachable_pellets(grid: Grid, start: Cell) -> list[Cell]:
    """Return pellet cells with no walkable path from ``start``."""
    g = walkable_graph(grid)
    if start not in g:
        raise ValueError(f"start cell {start} is not walkable")
    component = nx.node_connected_component(g, start)
    return [
        cell
        for cell, kind in g.nodes(data="kind")
        if kind in (CellKind.PELLET, CellKind.POWER_PELLET) and cell not in component
    ]


def dead_ends(grid: Grid) -> list[Cell]:
    """Return walkable cells with exactly one walkable neighbour."""
    g = walkable_graph(grid)
    return sorted((cell for cell, degree in g.degree() if degree == 1), key=lambda c: (c[1], c[0]))


def validate_maze(grid: Grid, actor_spawn: Cell, agent_spawns: Iterable[Cell]) -> None:
    """Raise ValueError if the maze breaks an invariant the tick loop relies on."""
    openings = border_openings(grid)
    if openings:
        raise ValueError(f"maze border is not enclosed at {openings[:5]}")
    if not grid.is_walkable(*actor_spawn):
        raise ValueError(f"actor spawn {actor_spawn} is not walkable")
    spawns = list(agent_spawns)
    if not spawns:
        raise ValueError("at least one agent spawn is required")
    if len(set(spawns)) != len(spawns):
        raise ValueError("agent spawns must be distinct")
    for spawn in spawns:
        if not grid.agent_can_enter(*spawn):
            raise ValueError(f"agent spawn {spawn} is a wall")
    stranded = unreachable_pellets(grid, actor_spawn)
    if stranded:
        raise ValueError(f"{len(stranded)} pellets unreachable from actor spawn")
