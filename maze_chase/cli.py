"""Command-line entrypoint: headless episodes, filmstrips, and maze checks."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import matplotlib

from maze_chase.config.constants import ACTOR_SPAWN, AGENT_SPAWNS, MAZE_TEMPLATE
from maze_chase.config.types import EpisodeConfig, GameConfig
from maze_chase.domain.grid import CellKind, Grid
from maze_chase.domain.maze import dead_ends, validate_maze
from maze_chase.domain.snapshot import FrameSnapshot
from maze_chase.simulation.episodes import play_episode, run_episodes
from maze_chase.viz.render import render_filmstrip
from maze_chase.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

_GAME_KEYS = (
    "initial_lives",
    "pellet_points",
    "power_pellet_points",
    "frightened_agent_points",
    "frighten_duration_ms",
    "tick_interval_ms",
)


def _load_config_file(path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    loaded = json.loads(Path(path).read_text())
    if not isinstance(loaded, dict):
        raise ValueError("config file must contain a JSON object")
    return loaded


def _game_config_from(file_cfg: dict[str, object]) -> GameConfig:
    """Build GameConfig from the ``game`` section of a config file."""
    section = file_cfg.get("game", {})
    if not isinstance(section, dict):
        raise ValueError("config 'game' section must be a JSON object")
    unknown = set(section) - set(_GAME_KEYS)
    if unknown:
        raise ValueError(f"unknown game config keys: {sorted(unknown)}")
    return GameConfig(**{key: int(value) for key, value in section.items()})


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def _handle_run(args: argparse.Namespace) -> None:
    file_cfg = _load_config_file(args.config)

    def _get(cli_val: object, key: str, default: object) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key, default)

    config = EpisodeConfig(
        n_episodes=int(_get(args.episodes, "n_episodes", 10)),  # type: ignore[call-overload]
        max_ticks=int(_get(args.max_ticks, "max_ticks", 2_000)),  # type: ignore[call-overload]
        sim_seed_start=int(_get(args.sim_seed, "sim_seed_start", 0)),  # type: ignore[call-overload]
        input_seed_start=int(_get(args.input_seed, "input_seed_start", 0)),  # type: ignore[call-overload]
        turn_probability=float(_get(args.turn_probability, "turn_probability", 0.25)),  # type: ignore[arg-type]
        out_dir=Path(str(_get(args.out_dir, "out_dir", "data"))),
        write_tick_log=bool(_get(args.tick_log, "write_tick_log", True)),
        game=_game_config_from(file_cfg),
    )
    results = run_episodes(config)
    summary = {
        "episodes": len(results),
        "won": sum(1 for r in results if r.phase == "won"),
        "lost": sum(1 for r in results if r.phase == "lost"),
        "unfinished": sum(1 for r in results if r.phase == "running"),
        "best_score": max(r.score for r in results),
        "out_dir": str(config.out_dir),
    }
    print(json.dumps(summary, ensure_ascii=False))


def _handle_render(args: argparse.Namespace) -> None:
    matplotlib.use("Agg")
    if args.every < 1:
        raise ValueError("--every must be >= 1")
    frames: list[FrameSnapshot] = []

    def keep_every(snapshot: FrameSnapshot) -> None:
        if snapshot.tick % args.every == 0 or snapshot.phase.is_terminal:
            frames.append(snapshot)

    play_episode(
        args.sim_seed,
        args.input_seed,
        max_ticks=args.ticks,
        turn_probability=args.turn_probability,
        on_frame=keep_every,
    )
    render_filmstrip(
        frames,
        output_path=args.output,
        columns=args.columns,
        theme=get_theme(args.theme),
    )
    logger.info("wrote %d frames to %s", len(frames), args.output)


def _handle_check_maze(args: argparse.Namespace) -> None:
    grid = Grid.from_template(MAZE_TEMPLATE)
    validate_maze(grid, ACTOR_SPAWN, AGENT_SPAWNS)
    report = {
        "width": grid.width,
        "height": grid.height,
        "pellets": len(grid.cells_of_kind(CellKind.PELLET)),
        "power_pellets": len(grid.cells_of_kind(CellKind.POWER_PELLET)),
        "dead_ends": [list(cell) for cell in dead_ends(grid)],
        "valid": True,
    }
    print(json.dumps(report, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _build_run_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("run", help="Play seeded headless episodes")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--episodes", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("--sim-seed", type=int, default=None)
    parser.add_argument("--input-seed", type=int, default=None)
    parser.add_argument("--turn-probability", type=float, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--tick-log", action=argparse.BooleanOptionalAction, default=None)
    parser.set_defaults(handler=_handle_run)


def _build_render_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("render", help="Render a filmstrip of one seeded episode")
    parser.add_argument("--output", type=Path, required=True)
    parser.add_argument("--ticks", type=int, default=40)
    parser.add_argument("--every", type=int, default=10)
    parser.add_argument("--columns", type=int, default=4)
    parser.add_argument("--sim-seed", type=int, default=0)
    parser.add_argument("--input-seed", type=int, default=0)
    parser.add_argument("--turn-probability", type=float, default=0.25)
    parser.add_argument("--theme", choices=sorted(REGISTERED_THEMES), default="default")
    parser.set_defaults(handler=_handle_render)


def _build_check_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("check-maze", help="Validate the fixed maze topology")
    parser.set_defaults(handler=_handle_check_maze)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maze-chase", description="Maze chase game core tools")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(subparsers)
    _build_render_parser(subparsers)
    _build_check_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for the ``maze-chase`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.handler(args)


if __name__ == "__main__":
    main()
