"""Tests for pacman_paradox.spawner module."""

from __future__ import annotations

from pacman_paradox.actors import Player
from pacman_paradox.config import GameConfig
from pacman_paradox.history import HistoryRecorder
from pacman_paradox.maze import Direction
from pacman_paradox.power import PowerMode
from pacman_paradox.spawner import CloneSpawner, SpawnSchedule, spawn_gap
from pacman_paradox.state import RunState, RunStatus


def _run(schedule: SpawnSchedule) -> RunState:
    recorder = HistoryRecorder()
    for x in range(1, 4):
        recorder.record_if_moved((x, 1), Direction.RIGHT, float(x))
    return RunState(
        generation=schedule.begin_run(),
        player=Player((1, 1)),
        ghosts=[],
        recorder=recorder,
        power=PowerMode(),
    )


class TestSpawnGap:
    def test_sequence_decays_to_floor(self) -> None:
        gaps = [spawn_gap(n) for n in range(12)]
        assert gaps == [30, 28, 26, 24, 22, 20, 18, 16, 15, 15, 15, 15]

    def test_non_increasing_and_bounded(self) -> None:
        gaps = [spawn_gap(n) for n in range(60)]
        assert all(a >= b for a, b in zip(gaps, gaps[1:]))
        assert all(15 <= g <= 30 for g in gaps)

    def test_custom_parameters(self) -> None:
        assert spawn_gap(3, base_gap=10, min_gap=4, decay=3) == 4
        assert spawn_gap(1, base_gap=10, min_gap=4, decay=3) == 7


class TestSpawnSchedule:
    def test_pop_due_respects_time(self) -> None:
        schedule = SpawnSchedule()
        gen = schedule.begin_run()
        schedule.schedule(5.0, gen)
        assert schedule.pop_due(4.9, gen) == 0
        assert schedule.pending() == [5.0]
        assert schedule.pop_due(5.0, gen) == 1
        assert schedule.pending() == []

    def test_pop_due_tolerates_float_tick_sums(self) -> None:
        schedule = SpawnSchedule()
        gen = schedule.begin_run()
        schedule.schedule(25.0, gen)
        assert schedule.pop_due(sum([1 / 60] * 1500), gen) == 1

    def test_cancelled_entries_are_discarded(self) -> None:
        schedule = SpawnSchedule()
        old = schedule.begin_run()
        schedule.schedule(5.0, old)
        schedule.cancel()
        new = schedule.begin_run()
        assert schedule.pending() == []
        assert schedule.pop_due(10.0, new) == 0
        assert schedule.pending(old) == []

    def test_pending_is_sorted(self) -> None:
        schedule = SpawnSchedule()
        gen = schedule.begin_run()
        for due in (9.0, 3.0, 6.0):
            schedule.schedule(due, gen)
        assert schedule.pending() == [3.0, 6.0, 9.0]


class TestCloneSpawner:
    def test_spawn_copies_buffer_and_schedules_next(self) -> None:
        schedule = SpawnSchedule()
        spawner = CloneSpawner(GameConfig(), schedule, (1, 1))
        run = _run(schedule)
        run.elapsed = 25.0
        clone = spawner.spawn(run)
        assert clone is not None
        assert clone.cell == (1, 1)
        assert clone.history == run.recorder.snapshot()
        assert (run.spawn_count, run.clone_count) == (1, 1)
        assert run.clones == [clone]
        assert schedule.pending() == [25.0 + 28.0]

    def test_clone_history_unaffected_by_later_recording(self) -> None:
        schedule = SpawnSchedule()
        spawner = CloneSpawner(GameConfig(), schedule, (1, 1))
        run = _run(schedule)
        clone = spawner.spawn(run)
        run.recorder.record_if_moved((9, 9), Direction.UP, 30.0)
        assert len(clone.history) == 3

    def test_poll_spawns_when_due(self) -> None:
        schedule = SpawnSchedule()
        spawner = CloneSpawner(GameConfig(), schedule, (1, 1))
        run = _run(schedule)
        run.elapsed = 25.0
        spawner.on_window_elapsed(run)
        run.elapsed = 52.0
        assert spawner.poll(run) == []
        run.elapsed = 53.0
        spawned = spawner.poll(run)
        assert len(spawned) == 1
        assert run.spawn_count == 2
        assert schedule.pending() == [53.0 + 26.0]

    def test_no_spawn_into_finished_run(self) -> None:
        schedule = SpawnSchedule()
        spawner = CloneSpawner(GameConfig(), schedule, (1, 1))
        run = _run(schedule)
        run.status = RunStatus.GAME_OVER
        assert spawner.spawn(run) is None
        assert run.clones == []
        assert schedule.pending() == []

    def test_no_spawn_into_stale_run(self) -> None:
        schedule = SpawnSchedule()
        spawner = CloneSpawner(GameConfig(), schedule, (1, 1))
        run = _run(schedule)
        schedule.cancel()
        assert spawner.spawn(run) is None
        assert run.spawn_count == 0
