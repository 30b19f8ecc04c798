from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tetro.game import ACTIVE_CELL, CellState


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        int(CellState.EMPTY): (245, 245, 245),
        int(CellState.LOCKED): (85, 85, 85),
        int(CellState.CLEARED): (0, 255, 0),
        ACTIVE_CELL: (51, 51, 51),
    }
    return palette.get(v, (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 40, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def _banner_font(self) -> pygame.font.Font:
        # Created on first use; pygame.font must be initialised by then.
        if self._font is None:
            self._font = pygame.font.SysFont(None, 48)
        return self._font

    def _grid_surface(self, state: np.ndarray, active: bool) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((51, 51, 51))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        if active:
            pygame.draw.rect(surf, (0, 0, 255), surf.get_rect(), 2)
        return surf

    def board_rect(self, state: np.ndarray) -> pygame.Rect:
        h, w = state.shape
        return pygame.Rect(self.margin, self.margin, w * self.cell_size, h * self.cell_size)

    def draw(self, screen: pygame.Surface, state: np.ndarray, active: bool = False,
             message: Optional[str] = None) -> None:
        screen.fill((238, 238, 238))
        screen.blit(self._grid_surface(state, active), (self.margin, self.margin))
        if message:
            text = self._banner_font().render(message, True, (0, 0, 0))
            screen.blit(text, text.get_rect(center=self.board_rect(state).center))
        pygame.display.flip()
