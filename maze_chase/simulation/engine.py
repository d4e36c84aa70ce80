"""Fixed-tick game simulation: the only mutating entry points of the core.

One ``tick`` runs, in order: actor movement, pellet consumption, per-agent
frighten expiry and random legal move, collision resolution, win check. The
order is fixed so that a seeded ``Random`` reproduces a game exactly.
"""

from __future__ import annotations

import logging
import threading
from random import Random

import numpy as np

from maze_chase.config.constants import (
    ACTOR_SPAWN,
    AGENT_MOVE_ORDER,
    AGENT_SPAWNS,
    DIRECTIONS,
    MAZE_TEMPLATE,
    STOP,
)
from maze_chase.config.types import GameConfig
from maze_chase.domain.entities import Actor, Agent
from maze_chase.domain.grid import ConsumeResult, Grid
from maze_chase.domain.snapshot import ActorView, AgentView, FrameSnapshot
from maze_chase.domain.state import GameState, Phase, TickReport
from maze_chase.simulation.clock import Clock, monotonic_ms

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the grid, the actor, the agents, the random source, and the clock.

    ``tick``, ``set_direction``, ``restart`` and ``snapshot`` share one lock, so
    input arriving on another thread is serialised against ticks.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: Random | None = None,
        sim_seed: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        if rng is not None and sim_seed is not None:
            raise ValueError("pass either rng or sim_seed, not both")
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else Random(sim_seed)
        self.clock: Clock = clock or monotonic_ms
        self._lock = threading.Lock()
        self._build()

    def _build(self) -> None:
        self.grid = Grid.from_template(MAZE_TEMPLATE)
        self.actor = Actor(*ACTOR_SPAWN, lives=self.config.initial_lives)
        self.agents = [Agent(agent_id, x, y) for agent_id, (x, y) in enumerate(AGENT_SPAWNS)]
        self.state = GameState(pellets_remaining=self.grid.pellet_count())
        self.tick_count = 0

    @property
    def phase(self) -> Phase:
        return self.state.phase

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def tick(self) -> TickReport:
        """Advance the game by one step; a no-op once the game has ended."""
        with self._lock:
            if self.state.phase.is_terminal:
                logger.debug("tick ignored: game already %s", self.state.phase.value)
                return TickReport(tick=self.tick_count, advanced=False, phase=self.state.phase)

            now = self.clock()
            self.tick_count += 1
            self._move_actor()
            consumed = self._consume_pellet(now)
            for agent in self.agents:
                agent.tick_frighten_state(now)
                self._move_agent(agent)
            eaten, life_lost = self._resolve_collisions()
            if self.state.phase is Phase.RUNNING and self.state.pellets_remaining == 0:
                self.state.phase = Phase.WON
                logger.info("game won at tick %d with score %d", self.tick_count, self.state.score)

            return TickReport(
                tick=self.tick_count,
                advanced=True,
                consumed=consumed.value,
                agents_eaten=tuple(eaten),
                life_lost=life_lost,
                phase=self.state.phase,
            )

    def set_direction(self, dx: int, dy: int) -> bool:
        """Request a new actor direction; return whether it took effect.

        Ignored once the game has ended, whatever the vector. While running, a
        vector outside the direction set raises ValueError and a turn into a
        wall is dropped with the current direction kept.
        """
        with self._lock:
            if self.state.phase.is_terminal:
                return False
            if (dx, dy) not in DIRECTIONS:
                raise ValueError(f"invalid direction vector ({dx}, {dy})")
            if not self.grid.is_walkable(self.actor.x + dx, self.actor.y + dy):
                return False
            self.actor.set_direction(dx, dy)
            return True

    def restart(self) -> None:
        """Rebuild grid, entities, and counters from the template; valid in any phase."""
        with self._lock:
            previous = self.state.phase
            self._build()
        logger.info("game restarted from %s", previous.value)

    def snapshot(self) -> FrameSnapshot:
        """Return the read-only render view of the current frame."""
        with self._lock:
            cells = np.array(self.grid.cells, copy=True)
            cells.setflags(write=False)
            return FrameSnapshot(
                tick=self.tick_count,
                cells=cells,
                actor=ActorView(
                    x=self.actor.x,
                    y=self.actor.y,
                    dx=self.actor.dx,
                    dy=self.actor.dy,
                    lives=self.actor.lives,
                    mouth_angle=self.actor.mouth_angle,
                ),
                agents=tuple(
                    AgentView(
                        agent_id=agent.agent_id,
                        x=agent.x,
                        y=agent.y,
                        dx=agent.dx,
                        dy=agent.dy,
                        frightened=agent.frightened,
                    )
                    for agent in self.agents
                ),
                score=self.state.score,
                pellets_remaining=self.state.pellets_remaining,
                phase=self.state.phase,
            )

    # ------------------------------------------------------------------
    # Tick stages
    # ------------------------------------------------------------------

    def _move_actor(self) -> None:
        """Advance the actor, or stop it dead at a wall."""
        actor = self.actor
        if self.grid.is_walkable(actor.x + actor.dx, actor.y + actor.dy):
            actor.advance()
        else:
            actor.set_direction(*STOP)

    def _consume_pellet(self, now: int) -> ConsumeResult:
        result = self.grid.consume_pellet_at(self.actor.x, self.actor.y)
        if result is ConsumeResult.PELLET:
            self.state.add_points(self.config.pellet_points)
            self.state.pellet_eaten()
        elif result is ConsumeResult.POWER_PELLET:
            self.state.add_points(self.config.power_pellet_points)
            self.state.pellet_eaten()
            until = now + self.config.frighten_duration_ms
            for agent in self.agents:
                agent.frighten(until)
        return result

    def _move_agent(self, agent: Agent) -> None:
        """Resample a uniformly random legal direction and take it."""
        legal = [
            (dx, dy)
            for dx, dy in AGENT_MOVE_ORDER
            if self.grid.agent_can_enter(agent.x + dx, agent.y + dy)
        ]
        agent.dx, agent.dy = self.rng.choice(legal) if legal else STOP
        if self.grid.agent_can_enter(agent.x + agent.dx, agent.y + agent.dy):
            agent.advance(agent.dx, agent.dy)
        else:
            agent.dx, agent.dy = STOP

    def _resolve_collisions(self) -> tuple[list[int], bool]:
        """Resolve actor/agent overlaps; return eaten agent ids and whether a life was lost.

        Eaten agents, and every agent after a lost life, return to the first
        agent's spawn rather than their own.
        """
        eaten: list[int] = []
        life_lost = False
        home = AGENT_SPAWNS[0]
        for agent in self.agents:
            if agent.position != self.actor.position:
                continue
            if agent.frightened:
                self.state.add_points(self.config.frightened_agent_points)
                agent.reset(*home)
                eaten.append(agent.agent_id)
                continue
            self.actor.lives -= 1
            life_lost = True
            if self.actor.lives <= 0:
                self.state.phase = Phase.LOST
                logger.info("game lost at tick %d with score %d", self.tick_count, self.state.score)
                break
            logger.debug("life lost at tick %d, %d remaining", self.tick_count, self.actor.lives)
            self.actor.reset(*ACTOR_SPAWN)
            for other in self.agents:
                other.reset(*home)
        return eaten, life_lost
