"""Tests for pacman_paradox.config module."""

from __future__ import annotations

import pytest

from pacman_paradox.config import DEFAULT_PURSUERS, MAZE_COLS, MAZE_LAYOUT, MAZE_ROWS, GameConfig, PursuerSpec
from pacman_paradox.maze import Direction, Maze


class TestGameConfig:
    def test_defaults(self) -> None:
        cfg = GameConfig()
        assert cfg.recording_window == 25.0
        assert cfg.power_duration == 10.0
        assert (cfg.base_gap, cfg.min_gap, cfg.gap_decay) == (30.0, 15.0, 2.0)
        assert cfg.tick == pytest.approx(1 / 60)
        assert cfg.player_speed == cfg.clone_speed == 0.15
        assert len(cfg.pursuers) == 2

    def test_layout_rows_have_uniform_width(self) -> None:
        assert len(MAZE_LAYOUT) == MAZE_ROWS
        assert all(len(row) == MAZE_COLS for row in MAZE_LAYOUT)

    def test_default_pursuers_start_on_open_cells(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        for spec in DEFAULT_PURSUERS:
            assert maze.is_open(spec.home)
            assert spec.heading in Direction.__members__

    @pytest.mark.parametrize("speed", [0.0, -0.1, 1.5])
    def test_rejects_bad_player_speed(self, speed: float) -> None:
        with pytest.raises(ValueError, match="speed"):
            GameConfig(player_speed=speed)

    def test_rejects_bad_pursuer_speed(self) -> None:
        spec = PursuerSpec(home=(1, 1), heading="LEFT", speed=2.0, color=(255, 0, 0))
        with pytest.raises(ValueError, match="speed"):
            GameConfig(pursuers=(spec,))

    def test_rejects_min_gap_above_base_gap(self) -> None:
        with pytest.raises(ValueError, match="min_gap"):
            GameConfig(base_gap=10.0, min_gap=20.0)

    @pytest.mark.parametrize(
        "field_name", ["recording_window", "power_duration", "tick"],
    )
    def test_rejects_non_positive_durations(self, field_name: str) -> None:
        with pytest.raises(ValueError, match=field_name):
            GameConfig(**{field_name: 0.0})

    def test_rejects_empty_layout(self) -> None:
        with pytest.raises(ValueError, match="layout"):
            GameConfig(layout=())
