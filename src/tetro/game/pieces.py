from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class PieceKind(IntEnum):
    SQUARE = 1  # 2x2
    TALL = 2    # 2 high, 1 wide
    SINGLE = 3  # 1x1


Shape = np.ndarray


BASE_SHAPES: Dict[PieceKind, Shape] = {
    PieceKind.SQUARE: np.array([[1, 1], [1, 1]], dtype=np.int8),
    PieceKind.TALL: np.array([[1], [1]], dtype=np.int8),
    PieceKind.SINGLE: np.array([[1]], dtype=np.int8),
}


@dataclass(frozen=True)
class PieceTemplate:
    kind: PieceKind
    name: str
    offsets: Tuple[Tuple[int, int], ...]  # (col, row) relative to the origin
    width: int
    height: int

    @classmethod
    def from_shape(cls, kind: PieceKind, name: str, shape: Shape) -> "PieceTemplate":
        h, w = shape.shape
        offsets = tuple((dx, dy) for dy in range(h) for dx in range(w) if shape[dy, dx])
        return cls(kind=kind, name=name, offsets=offsets, width=int(w), height=int(h))

    def cells_at(self, origin_col: int, origin_row: int) -> List[Tuple[int, int]]:
        return [(origin_col + dx, origin_row + dy) for dx, dy in self.offsets]


PIECE_CATALOG: Tuple[PieceTemplate, ...] = (
    PieceTemplate.from_shape(PieceKind.SQUARE, "2x2", BASE_SHAPES[PieceKind.SQUARE]),
    PieceTemplate.from_shape(PieceKind.TALL, "2x1", BASE_SHAPES[PieceKind.TALL]),
    PieceTemplate.from_shape(PieceKind.SINGLE, "1x1", BASE_SHAPES[PieceKind.SINGLE]),
)

TEMPLATES_BY_KIND: Dict[PieceKind, PieceTemplate] = {t.kind: t for t in PIECE_CATALOG}


def random_template(rng: random.Random) -> PieceTemplate:
    """Draw one of the catalog templates with equal probability."""
    return rng.choice(PIECE_CATALOG)


@dataclass
class ActivePiece:
    template: PieceTemplate
    col: int = 0
    row: int = 0

    def cells(self) -> List[Tuple[int, int]]:
        return self.template.cells_at(self.col, self.row)

    def candidate(self, dx: int, dy: int) -> List[Tuple[int, int]]:
        return self.template.cells_at(self.col + dx, self.row + dy)

    @property
    def origin(self) -> Tuple[int, int]:
        return self.col, self.row
