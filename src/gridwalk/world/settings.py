# src/gridwalk/world/settings.py
from __future__ import annotations
from dataclasses import dataclass

from .grid import Direction, in_bounds


@dataclass(frozen=True)
class GameSettings:
    rows_count: int = 10
    cols_count: int = 10
    start_x: int = 0
    start_y: int = 0
    start_direction: Direction = Direction.RIGHT
    steps_in_second: float = 5
    player_cell_color: str = "red"
    empty_cell_color: str = "blue"
    # ventana arcade
    cell_size: int = 48
    title: str = "Gridwalk"
    container_id: str = "game"

    def __post_init__(self) -> None:
        for name in ("rows_count", "cols_count", "start_x", "start_y", "cell_size"):
            value = getattr(self, name)
            # bool es subclase de int: no se admite
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
        rate = self.steps_in_second
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            raise ValueError(f"steps_in_second must be a number, got {rate!r}")
        if self.rows_count <= 0 or self.cols_count <= 0:
            raise ValueError(
                f"Grid size must be positive: rows={self.rows_count} cols={self.cols_count}"
            )
        if not in_bounds((self.start_x, self.start_y), self.cols_count, self.rows_count):
            raise ValueError(
                f"Start position ({self.start_x}, {self.start_y}) outside "
                f"{self.cols_count}x{self.rows_count} grid"
            )
        if not isinstance(self.start_direction, Direction):
            raise ValueError(f"Invalid start direction: {self.start_direction!r}")
        if self.steps_in_second <= 0:
            raise ValueError(f"steps_in_second must be > 0: {self.steps_in_second}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be > 0: {self.cell_size}")
        if not self.player_cell_color or not self.empty_cell_color:
            raise ValueError("Cell colors cannot be empty")

    @property
    def tick_interval(self) -> float:
        """Segundos entre ticks."""
        return 1 / self.steps_in_second

    @property
    def tick_interval_ms(self) -> float:
        return 1000 / self.steps_in_second


SETTINGS = GameSettings()
