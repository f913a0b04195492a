# src/gridwalk/world/player.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .grid import Cell, Direction, offset


@dataclass
class Player:
    """
    Ficha del jugador sobre el grid:
    - Guarda posición (x, y) y dirección de avance.
    - No valida límites: el bucle de juego decide si se puede dar el paso.
    """
    x: int = 0
    y: int = 0
    direction: Optional[Direction] = None

    def init(self, x: int, y: int, direction: Direction) -> None:
        self.x = x
        self.y = y
        self.direction = direction

    @property
    def position(self) -> Cell:
        return self.x, self.y

    def set_direction(self, direction: object) -> bool:
        """Cambia la dirección para el próximo paso. Valores no reconocidos → no-op."""
        parsed = Direction.parse(direction)
        if parsed is None:
            return False
        self.direction = parsed
        return True

    def compute_next_position(self) -> Cell:
        if self.direction is None:
            return self.position
        return offset(self.position, self.direction)

    def step(self) -> None:
        self.x, self.y = self.compute_next_position()
