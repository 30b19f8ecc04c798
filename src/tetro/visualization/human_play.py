from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from tetro.game import GameConfig, GameState, GravityClock, InputDispatcher, Outcome, TetroGame
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_INPUT: Dict[int, str] = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_r: "reset",
}

OUTCOME_MESSAGES = {
    Outcome.WIN: "Congrats!",
    Outcome.LOSS: "Failed",
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Tetro with the keyboard")
    p.add_argument("--columns", type=int, default=10)
    p.add_argument("--rows", type=int, default=12)
    p.add_argument("--gravity-ms", type=int, default=1000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--restart-delay-ms", type=int, default=100)
    p.add_argument("--cell-size", type=int, default=40)
    p.add_argument("--log-level", default="INFO")
    return p


def run(config: Optional[GameConfig] = None, restart_delay_ms: int = 100, cell_size: int = 40) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = TetroGame(config)
        gravity = GravityClock(game)
        inputs = InputDispatcher(game)
        renderer = Renderer(cell_size=cell_size)

        # Outcome banner shown until the restart delay elapses
        ended_at: Optional[int] = None
        message: Optional[str] = None

        def on_outcome(outcome: Outcome) -> None:
            nonlocal ended_at, message
            ended_at = pygame.time.get_ticks()
            message = OUTCOME_MESSAGES[outcome]

        game.add_outcome_listener(on_outcome)

        state = game.render_state()
        h, w = state.shape
        margin = renderer.margin
        screen = pygame.display.set_mode((w * cell_size + margin * 2, h * cell_size + margin * 2))
        pygame.display.set_caption("Tetro")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if renderer.board_rect(game.render_state()).collidepoint(event.pos):
                        inputs.dispatch("activate")
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in KEY_TO_INPUT:
                        inputs.dispatch(KEY_TO_INPUT[event.key])
                        if KEY_TO_INPUT[event.key] == "reset":
                            gravity.reset()
                            ended_at, message = None, None

            gravity.advance(clock.get_time())

            if ended_at is not None and pygame.time.get_ticks() - ended_at >= restart_delay_ms:
                ended_at, message = None, None
                gravity.reset()
                game.reset()
                game.activate()

            banner = message
            if banner is None and game.state is GameState.IDLE:
                banner = "Click to Start"
            renderer.draw(screen, game.render_state(), active=game.is_running, message=banner)

            clock.tick(60)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.INFO))
    config = GameConfig(
        columns=args.columns,
        rows=args.rows,
        gravity_ms=args.gravity_ms,
        random_seed=args.seed,
    )
    logger.info("starting %dx%d board, gravity %d ms", config.columns, config.rows, config.gravity_ms)
    run(config, restart_delay_ms=args.restart_delay_ms, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
