# src/gridwalk/world/renderer.py
"""
Matriz de celdas coloreables y su repintado.

El renderer no sabe nada de arcade: trabaja contra una DisplaySurface que
crea "handles" de celda con un atributo `color`. MemorySurface sirve para
ejecutar sin ventana (tests, modo headless); SpriteSurface (scene.py) pinta
con sprites.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional

from .grid import Cell, cell_index, in_bounds, iter_grid_cells


@dataclass(eq=False)
class GridCell:
    row: int
    col: int
    color: Optional[str] = None


class DisplaySurface(ABC):

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def create_cell(self, row: int, col: int) -> Any:
        """Crea y adjunta una celda en (row, col). Debe exponer `color` asignable."""


class MemorySurface(DisplaySurface):

    def __init__(self) -> None:
        self.cells: List[GridCell] = []

    def clear(self) -> None:
        self.cells = []

    def create_cell(self, row: int, col: int) -> GridCell:
        cell = GridCell(row, col)
        self.cells.append(cell)
        return cell


class GridRenderer:

    def __init__(self, surface: Optional[DisplaySurface] = None) -> None:
        self.surface = surface if surface is not None else MemorySurface()
        self.rows_count = 0
        self.cols_count = 0
        self._cells: List[Any] = []
        self._built = False

    def build(self, rows_count: int, cols_count: int) -> None:
        """Descarta las celdas previas y crea rows x cols celdas en orden row-major."""
        self.surface.clear()
        self._cells = []
        for col, row in iter_grid_cells(rows_count, cols_count):
            self._cells.append(self.surface.create_cell(row, col))
        self.rows_count = rows_count
        self.cols_count = cols_count
        self._built = True

    @property
    def cells(self) -> List[Any]:
        return list(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def cell_at(self, x: int, y: int) -> Any:
        if not self._built:
            raise RuntimeError("Grid not built; call build() first")
        if not in_bounds((x, y), self.cols_count, self.rows_count):
            raise IndexError(
                f"Cell ({x}, {y}) outside {self.cols_count}x{self.rows_count} grid"
            )
        return self._cells[cell_index((x, y), self.cols_count)]

    def render(self, player_x: int, player_y: int, empty_color: Any, player_color: Any) -> None:
        player_cell = self.cell_at(player_x, player_y)
        for cell in self._cells:
            cell.color = empty_color
        player_cell.color = player_color

    def colors(self) -> List[Any]:
        """Foto row-major de los colores actuales."""
        return [cell.color for cell in self._cells]

    def colored_cells(self, color: Any) -> List[Cell]:
        return [(i % self.cols_count, i // self.cols_count)
                for i, cell in enumerate(self._cells) if cell.color == color]
