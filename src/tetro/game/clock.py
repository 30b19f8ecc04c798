from __future__ import annotations

from typing import Callable, Dict

from .core import TetroGame


class GravityClock:
    """Turns elapsed wall time into gravity ticks.

    Feed it the milliseconds since the previous frame; it calls ``tick()`` once
    per full interval and keeps the remainder for the next call.
    """

    def __init__(self, game: TetroGame, interval_ms: int | None = None) -> None:
        self.game = game
        self.interval_ms = int(interval_ms if interval_ms is not None else game.config.gravity_ms)
        if self.interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {self.interval_ms}")
        self._elapsed = 0

    def advance(self, elapsed_ms: int) -> int:
        """Advance by ``elapsed_ms`` and return the number of ticks issued."""
        if elapsed_ms <= 0:
            return 0
        self._elapsed += int(elapsed_ms)
        ticks = 0
        while self._elapsed >= self.interval_ms:
            self._elapsed -= self.interval_ms
            self.game.tick()
            ticks += 1
        return ticks

    def reset(self) -> None:
        self._elapsed = 0


class InputDispatcher:
    """Maps named inputs to engine commands; unknown inputs are ignored."""

    def __init__(self, game: TetroGame) -> None:
        self.game = game
        self.commands: Dict[str, Callable[[], None]] = {
            "left": game.move_left,
            "right": game.move_right,
            "activate": game.activate,
            "reset": game.reset,
        }

    def dispatch(self, name: str) -> bool:
        command = self.commands.get(name)
        if command is None:
            return False
        command()
        return True
