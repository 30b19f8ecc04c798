from __future__ import annotations

import pytest

from tetro.game import GameConfig, GameState, GravityClock, InputDispatcher, TetroGame


def running_game(**kwargs) -> TetroGame:
    game = TetroGame(GameConfig(random_seed=0, **kwargs))
    game.activate()
    return game


def test_clock_ticks_once_per_interval_and_keeps_remainder():
    game = running_game()
    clock = GravityClock(game)
    assert clock.advance(999) == 0
    assert game.current_piece.row == 0
    assert clock.advance(1) == 1
    assert game.current_piece.row == 1
    assert clock.advance(2500) == 2
    assert game.current_piece.row == 3
    assert clock.advance(500) == 1
    assert game.current_piece.row == 4


def test_clock_uses_configured_interval():
    game = running_game(gravity_ms=250)
    clock = GravityClock(game)
    assert clock.interval_ms == 250
    assert clock.advance(1000) == 4


def test_clock_reset_drops_partial_interval():
    game = running_game()
    clock = GravityClock(game)
    clock.advance(900)
    clock.reset()
    assert clock.advance(900) == 0
    assert clock.advance(0) == 0
    assert clock.advance(-50) == 0


def test_clock_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        GravityClock(TetroGame(), interval_ms=0)


def test_dispatcher_routes_inputs():
    game = TetroGame(GameConfig(random_seed=0))
    inputs = InputDispatcher(game)
    assert inputs.dispatch("activate")
    assert game.state is GameState.RUNNING
    inputs.dispatch("right")
    inputs.dispatch("right")
    inputs.dispatch("left")
    assert game.current_piece.col == 1
    assert not inputs.dispatch("rotate")
    assert game.current_piece.col == 1
    inputs.dispatch("reset")
    assert game.state is GameState.IDLE
