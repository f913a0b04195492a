# src/gridwalk/world/grid.py
from __future__ import annotations
from enum import Enum
from typing import Iterator, Optional, Tuple

Cell = Tuple[int, int]


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Cell:
        """Desplazamiento (dx, dy) de un paso; y crece hacia abajo."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, value: object) -> Optional["Direction"]:
        """Acepta un Direction o su nombre ('up', 'RIGHT'...). Si no se reconoce → None."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def offset(cell: Cell, direction: Direction) -> Cell:
    x, y = cell
    dx, dy = direction.delta
    return x + dx, y + dy


def in_bounds(cell: Cell, cols_count: int, rows_count: int) -> bool:
    x, y = cell
    return 0 <= x < cols_count and 0 <= y < rows_count


def cell_index(cell: Cell, cols_count: int) -> int:
    """Índice row-major de la celda (x, y) en una secuencia plana."""
    x, y = cell
    return y * cols_count + x


def iter_grid_cells(rows_count: int, cols_count: int) -> Iterator[Cell]:
    """Itera por todas las celdas del mapa, fila a fila."""
    for y in range(rows_count):
        for x in range(cols_count):
            yield (x, y)


def to_world(cell: Cell, grid_size: int, rows_count: int) -> Tuple[float, float]:
    """Centro de celda → coordenadas de mundo (px). arcade pone el origen abajo: se invierte la fila."""
    cx, cy = cell
    return (cx + 0.5) * grid_size, (rows_count - cy - 0.5) * grid_size
