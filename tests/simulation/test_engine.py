"""Tests for the fixed-tick Simulation engine on the reference maze."""

from __future__ import annotations

import logging
import threading
from random import Random

import pytest

from maze_chase.config.constants import (
    ACTOR_SPAWN,
    AGENT_MOVE_ORDER,
    AGENT_SPAWNS,
    MAZE_TEMPLATE,
    STOP,
)
from maze_chase.config.types import GameConfig
from maze_chase.domain.grid import CellKind
from maze_chase.domain.state import Phase
from maze_chase.simulation.clock import ManualClock
from maze_chase.simulation.engine import Simulation

INITIAL_PELLETS = sum(code in (2, 3) for row in MAZE_TEMPLATE for code in row)

# (8, 1) is a dead end whose only open neighbour is (7, 1); an agent parked
# there must step onto (7, 1) on the next tick.
DEAD_END = (8, 1)
DEAD_END_EXIT = (7, 1)
# (1, 19) is a dead end far from everything else; its only exit is (2, 19).
PARKING = (1, 19)
PARKING_EXIT = (2, 19)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(1_000)


@pytest.fixture
def sim(clock: ManualClock) -> Simulation:
    return Simulation(sim_seed=0, clock=clock)


def _place_actor(sim: Simulation, cell: tuple[int, int], direction: tuple[int, int]) -> None:
    sim.actor.x, sim.actor.y = cell
    sim.actor.set_direction(*direction)


def _place_agent(sim: Simulation, agent_id: int, cell: tuple[int, int]) -> None:
    agent = sim.agents[agent_id]
    agent.x, agent.y = cell


def _pre_eat(sim: Simulation, cell: tuple[int, int]) -> None:
    """Consume a pellet outside the tick so the tick itself scores nothing there."""
    sim.grid.consume_pellet_at(*cell)
    sim.state.pellets_remaining = sim.grid.pellet_count()


def _ambush(sim: Simulation) -> None:
    """Actor idles on the dead-end exit while agent 0 is forced onto it."""
    _pre_eat(sim, DEAD_END_EXIT)
    _place_actor(sim, DEAD_END_EXIT, STOP)
    _place_agent(sim, 0, DEAD_END)
    _place_agent(sim, 1, PARKING)


class TestInitialState:
    def test_reference_example(self, sim: Simulation) -> None:
        snapshot = sim.snapshot()
        assert (snapshot.actor.x, snapshot.actor.y) == ACTOR_SPAWN
        assert (snapshot.actor.dx, snapshot.actor.dy) == (1, 0)
        assert snapshot.lives == 3
        assert snapshot.score == 0
        assert snapshot.pellets_remaining == INITIAL_PELLETS

        assert sim.set_direction(0, -1) is False
        assert sim.actor.direction == (1, 0)

        report = sim.tick()
        assert sim.actor.position == (10, 13)
        assert sim.state.score == 10
        assert sim.state.pellets_remaining == INITIAL_PELLETS - 1
        assert report.advanced is True
        assert report.consumed == "pellet"

    def test_agents_start_on_distinct_house_cells(self, sim: Simulation) -> None:
        positions = [agent.position for agent in sim.agents]
        assert positions == list(AGENT_SPAWNS)
        for agent in sim.agents:
            assert sim.grid.kind_at(*agent.position) is CellKind.EMPTY
            assert agent.direction == STOP
            assert agent.frightened is False

    def test_spawn_pellet_is_not_eaten_before_first_tick(self, sim: Simulation) -> None:
        assert sim.grid.kind_at(*ACTOR_SPAWN) is CellKind.PELLET

    def test_rng_and_seed_are_exclusive(self) -> None:
        with pytest.raises(ValueError, match="rng or sim_seed"):
            Simulation(rng=Random(0), sim_seed=0)

    def test_custom_lives(self) -> None:
        sim = Simulation(GameConfig(initial_lives=5), sim_seed=0)
        assert sim.actor.lives == 5


class TestActorMovement:
    def test_stops_at_wall_instead_of_queueing(self, sim: Simulation) -> None:
        _place_actor(sim, (1, 1), (0, -1))
        sim.tick()
        assert sim.actor.position == (1, 1)
        assert sim.actor.direction == STOP
        # The pellet under a stopped actor is still eaten
        assert sim.state.score == 10

    def test_set_direction_into_open_cell(self, sim: Simulation) -> None:
        assert sim.set_direction(-1, 0) is True
        assert sim.actor.direction == (-1, 0)
        sim.tick()
        assert sim.actor.position == (8, 13)

    def test_blocked_turn_keeps_current_direction(self, sim: Simulation) -> None:
        sim.set_direction(-1, 0)
        assert sim.set_direction(0, 1) is False
        assert sim.actor.direction == (-1, 0)

    def test_rejects_non_unit_direction(self, sim: Simulation) -> None:
        with pytest.raises(ValueError, match="invalid direction"):
            sim.set_direction(2, 0)
        with pytest.raises(ValueError):
            sim.set_direction(1, 1)

    def test_input_ignored_after_game_ends(self, sim: Simulation) -> None:
        sim.state.phase = Phase.WON
        assert sim.set_direction(-1, 0) is False
        assert sim.actor.direction == (1, 0)

    @pytest.mark.parametrize("phase", [Phase.WON, Phase.LOST])
    def test_invalid_vector_ignored_after_game_ends(self, sim: Simulation, phase: Phase) -> None:
        sim.state.phase = phase
        assert sim.set_direction(2, 0) is False
        assert sim.actor.direction == (1, 0)

    def test_mouth_animates_only_on_moves(self, sim: Simulation) -> None:
        sim.tick()
        assert sim.actor.mouth_angle == 5.0
        _place_actor(sim, (1, 1), (0, -1))
        sim.tick()
        assert sim.actor.mouth_angle == 5.0


class TestPowerPellet:
    def test_power_pellet_frightens_every_agent(
        self, sim: Simulation, clock: ManualClock
    ) -> None:
        _place_actor(sim, (18, 1), (1, 0))
        report = sim.tick()
        assert sim.actor.position == (19, 1)
        assert report.consumed == "power_pellet"
        assert sim.state.score == 50
        assert sim.state.pellets_remaining == INITIAL_PELLETS - 1
        for agent in sim.agents:
            assert agent.frightened is True
            assert agent.frightened_until == clock() + 8_000

    def test_frightened_expires_strictly_after_deadline(
        self, sim: Simulation, clock: ManualClock
    ) -> None:
        _place_actor(sim, (18, 1), (1, 0))
        sim.tick()
        clock.set(9_000)
        sim.tick()
        assert all(agent.frightened for agent in sim.agents)
        clock.set(9_001)
        sim.tick()
        assert not any(agent.frightened for agent in sim.agents)

    def test_custom_frighten_duration(self, clock: ManualClock) -> None:
        sim = Simulation(GameConfig(frighten_duration_ms=100), sim_seed=0, clock=clock)
        _place_actor(sim, (18, 1), (1, 0))
        sim.tick()
        assert sim.agents[0].frightened_until == 1_100


class TestAgentMovement:
    def test_agents_always_take_a_legal_step(self, sim: Simulation) -> None:
        for _ in range(50):
            before = [agent.position for agent in sim.agents]
            report = sim.tick()
            if report.life_lost or report.agents_eaten:
                break
            for agent, (x, y) in zip(sim.agents, before, strict=True):
                assert agent.direction in AGENT_MOVE_ORDER
                assert agent.position == (x + agent.dx, y + agent.dy)
                assert sim.grid.kind_at(*agent.position) is not CellKind.WALL

    def test_agent_forced_out_of_dead_end(self, sim: Simulation) -> None:
        _place_agent(sim, 1, PARKING)
        sim.tick()
        assert sim.agents[1].position == PARKING_EXIT
        assert sim.agents[1].direction == (1, 0)

    def test_agent_moves_freely_inside_house(self, sim: Simulation) -> None:
        _place_agent(sim, 0, (10, 10))
        sim.tick()
        assert sim.agents[0].position in {(10, 9), (10, 11), (9, 10), (11, 10)}

    def test_boxed_in_agent_stays_put(
        self, sim: Simulation, caplog: pytest.LogCaptureFixture
    ) -> None:
        _place_agent(sim, 0, (0, 0))
        with caplog.at_level(logging.WARNING, logger="maze_chase.domain.grid"):
            sim.tick()
        assert sim.agents[0].position == (0, 0)
        assert sim.agents[0].direction == STOP
        assert "outside the maze border" in caplog.text

    def test_same_seed_same_game(self) -> None:
        def play(seed: int) -> list[tuple[int, int]]:
            sim = Simulation(sim_seed=seed, clock=ManualClock())
            trail = []
            for _ in range(40):
                sim.tick()
                trail.extend(agent.position for agent in sim.agents)
            return trail

        assert play(3) == play(3)

    def test_injected_rng_drives_agent_choice(self) -> None:
        class FirstChoice(Random):
            def choice(self, seq):  # type: ignore[no-untyped-def]
                return seq[0]

        sim = Simulation(rng=FirstChoice(), clock=ManualClock())
        # From (9, 9) up is a wall, so the first legal move is down
        sim.tick()
        assert sim.agents[0].position == (9, 10)
        assert sim.agents[0].direction == (0, 1)


class TestCollisions:
    def test_frightened_agent_is_eaten(self, sim: Simulation, clock: ManualClock) -> None:
        _ambush(sim)
        sim.agents[0].frighten(clock() + 8_000)
        report = sim.tick()
        assert report.agents_eaten == (0,)
        assert sim.state.score == 200
        assert sim.agents[0].position == AGENT_SPAWNS[0]
        assert sim.agents[0].frightened is False
        # Only the eaten agent is relocated; the actor is untouched
        assert sim.agents[1].position == PARKING_EXIT
        assert sim.actor.position == DEAD_END_EXIT
        assert sim.actor.lives == 3
        assert report.life_lost is False

    def test_eaten_second_agent_returns_to_first_agent_spawn(
        self, sim: Simulation, clock: ManualClock
    ) -> None:
        _ambush(sim)
        _place_agent(sim, 0, PARKING)
        _place_agent(sim, 1, DEAD_END)
        sim.agents[1].frighten(clock() + 8_000)
        sim.tick()
        assert sim.agents[1].position == AGENT_SPAWNS[0]
        assert sim.agents[1].position != AGENT_SPAWNS[1]

    def test_lethal_collision_resets_actor_and_all_agents(self, sim: Simulation) -> None:
        _ambush(sim)
        pellets_before = sim.state.pellets_remaining
        report = sim.tick()
        assert report.life_lost is True
        assert sim.actor.lives == 2
        assert sim.actor.position == ACTOR_SPAWN
        assert sim.actor.direction == (1, 0)
        assert [agent.position for agent in sim.agents] == [AGENT_SPAWNS[0]] * 2
        assert sim.state.score == 0
        assert sim.state.pellets_remaining == pellets_before
        assert sim.state.phase is Phase.RUNNING

    def test_losing_last_life_ends_game(self, sim: Simulation) -> None:
        _ambush(sim)
        sim.actor.lives = 1
        report = sim.tick()
        assert report.phase is Phase.LOST
        assert sim.state.phase is Phase.LOST
        assert sim.actor.lives == 0

    def test_lives_never_go_negative(self, sim: Simulation) -> None:
        _ambush(sim)
        _place_agent(sim, 1, DEAD_END)
        sim.actor.lives = 1
        sim.tick()
        assert sim.actor.lives == 0
        assert sim.state.phase is Phase.LOST

    def test_second_collision_after_reset_does_not_double_count(self, sim: Simulation) -> None:
        _ambush(sim)
        _place_agent(sim, 1, DEAD_END)
        sim.tick()
        assert sim.actor.lives == 2

    def test_three_ambushes_lose_the_game(self, sim: Simulation) -> None:
        for expected_lives in (2, 1, 0):
            _ambush(sim)
            sim.tick()
            assert sim.actor.lives == expected_lives
        assert sim.state.phase is Phase.LOST


class TestTerminalPhases:
    def _leave_one_pellet(self, sim: Simulation, keep: tuple[int, int]) -> None:
        for kind in (CellKind.PELLET, CellKind.POWER_PELLET):
            for cell in sim.grid.cells_of_kind(kind):
                if cell != keep:
                    sim.grid.consume_pellet_at(*cell)
        sim.state.pellets_remaining = sim.grid.pellet_count()

    def test_last_pellet_wins_on_same_tick(self, sim: Simulation) -> None:
        self._leave_one_pellet(sim, (10, 13))
        assert sim.state.pellets_remaining == 1
        report = sim.tick()
        assert report.phase is Phase.WON
        assert sim.state.pellets_remaining == 0
        assert sim.state.score == 10

    def test_no_mutation_after_win(self, sim: Simulation, clock: ManualClock) -> None:
        self._leave_one_pellet(sim, (10, 13))
        sim.tick()
        frozen = sim.snapshot()
        for _ in range(5):
            clock.advance(150)
            report = sim.tick()
            assert report.advanced is False
        after = sim.snapshot()
        assert after.same_state(frozen)
        assert after.tick == frozen.tick

    def test_no_mutation_after_loss(self, sim: Simulation) -> None:
        _ambush(sim)
        sim.actor.lives = 1
        sim.tick()
        frozen = sim.snapshot()
        report = sim.tick()
        assert report.advanced is False
        assert report.phase is Phase.LOST
        assert sim.snapshot().same_state(frozen)


class TestRestart:
    def test_restart_reproduces_fresh_game(self, sim: Simulation) -> None:
        fresh = Simulation(sim_seed=99, clock=ManualClock()).snapshot()
        sim.set_direction(-1, 0)
        for _ in range(25):
            sim.tick()
        sim.restart()
        restarted = sim.snapshot()
        assert restarted.same_state(fresh)
        assert restarted.tick == 0

    @pytest.mark.parametrize("phase", [Phase.WON, Phase.LOST, Phase.RUNNING])
    def test_restart_from_any_phase(self, sim: Simulation, phase: Phase) -> None:
        sim.state.phase = phase
        sim.restart()
        assert sim.state.phase is Phase.RUNNING
        assert sim.actor.lives == 3
        assert sim.tick().advanced is True


class TestInvariants:
    def test_long_random_game_keeps_invariants(self, clock: ManualClock) -> None:
        sim = Simulation(sim_seed=11, clock=clock)
        inputs = Random(12)
        prev_score = 0
        prev_pellets = sim.state.pellets_remaining
        for _ in range(1_500):
            if inputs.random() < 0.3:
                sim.set_direction(*inputs.choice(AGENT_MOVE_ORDER))
            clock.advance(150)
            sim.tick()
            assert sim.grid.kind_at(*sim.actor.position) is not CellKind.WALL
            for agent in sim.agents:
                assert sim.grid.kind_at(*agent.position) is not CellKind.WALL
            assert sim.state.pellets_remaining == sim.grid.pellet_count()
            assert sim.state.score >= prev_score
            assert sim.state.pellets_remaining <= prev_pellets
            assert 0 <= sim.actor.lives <= 3
            prev_score = sim.state.score
            prev_pellets = sim.state.pellets_remaining
            if sim.state.phase is not Phase.RUNNING:
                break

    def test_input_thread_serialises_with_ticks(self, clock: ManualClock) -> None:
        sim = Simulation(sim_seed=4, clock=clock)
        errors: list[Exception] = []

        def press_keys(seed: int) -> None:
            rng = Random(seed)
            try:
                for _ in range(300):
                    sim.set_direction(*rng.choice(AGENT_MOVE_ORDER))
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=press_keys, args=(seed,)) for seed in range(3)]
        for thread in threads:
            thread.start()
        for _ in range(300):
            sim.tick()
            assert sim.grid.is_walkable(*sim.actor.position)
        for thread in threads:
            thread.join()
        assert errors == []
