# src/gridwalk/world/scene.py
"""
Capa visual con arcade:
- Un sprite de color sólido por celda (SpriteSurface); el renderer los recolorea.
- arcade.schedule dispara los ticks; on_key_press alimenta el manejador de teclas.
Controles:
- Flechas / WASD: cambiar dirección. El resto de teclas se ignora;
  se sale cerrando la ventana.
"""

from __future__ import annotations
from typing import Any, Optional, Tuple

import arcade

from gridwalk.utils.logger import get_logger
from gridwalk.world.game import Game, KeyHandler
from gridwalk.world.grid import to_world
from gridwalk.world.renderer import DisplaySurface
from gridwalk.world.settings import SETTINGS, GameSettings

# símbolo arcade → nombre de tecla que entiende controls.KEY_BINDINGS
_KEY_NAMES = {
    arcade.key.UP: "UP",
    arcade.key.DOWN: "DOWN",
    arcade.key.LEFT: "LEFT",
    arcade.key.RIGHT: "RIGHT",
    arcade.key.W: "W",
    arcade.key.A: "A",
    arcade.key.S: "S",
    arcade.key.D: "D",
}


def key_name(symbol: int) -> Any:
    """Nombre de la tecla; las que no tienen nombre llegan como código numérico y el juego las ignora."""
    return _KEY_NAMES.get(symbol, symbol)


def resolve_color(color: Any) -> Tuple[int, ...]:
    """'red' → arcade.color.RED. Las tuplas RGB(A) pasan tal cual."""
    if isinstance(color, (tuple, list)):
        return tuple(color)
    value = getattr(arcade.color, str(color).strip().upper(), None)
    # el módulo también exporta clases y helpers; solo valen las tuplas
    if not isinstance(value, tuple):
        raise ValueError(f"Unknown color name: {color!r}")
    return value


class SpriteCell:
    """Handle de celda: guarda el nombre del color y tiñe el sprite."""

    def __init__(self, sprite: arcade.Sprite) -> None:
        self.sprite = sprite
        self._color: Any = None

    @property
    def color(self) -> Any:
        return self._color

    @color.setter
    def color(self, value: Any) -> None:
        self.sprite.color = resolve_color(value)
        self._color = value


class SpriteSurface(DisplaySurface):

    def __init__(self, cell_size: int, rows_count: int) -> None:
        self.cell_size = cell_size
        self.rows_count = rows_count
        self.sprites = arcade.SpriteList()

    def clear(self) -> None:
        self.sprites = arcade.SpriteList()

    def create_cell(self, row: int, col: int) -> SpriteCell:
        g = self.cell_size
        # textura blanca: el color final lo pone el tinte (sprite.color)
        sprite = arcade.SpriteSolidColor(width=g - 2, height=g - 2, color=arcade.color.WHITE)
        sprite.center_x, sprite.center_y = to_world((col, row), g, self.rows_count)
        self.sprites.append(sprite)
        return SpriteCell(sprite)

    def draw(self) -> None:
        self.sprites.draw()


class GameWindow(arcade.Window):
    def __init__(self, settings: GameSettings = SETTINGS) -> None:
        self.settings = settings
        self.g = settings.cell_size
        super().__init__(
            settings.cols_count * self.g,
            settings.rows_count * self.g,
            settings.title,
            update_rate=1 / 60,
        )
        arcade.set_background_color(arcade.color.BLACK)
        self.log = get_logger("gridwalk.visual")

        self._key_handler: Optional[KeyHandler] = None
        self.surface = SpriteSurface(self.g, settings.rows_count)
        self.game = Game(
            settings,
            surface=self.surface,
            scheduler=arcade.schedule,
            key_binder=self._bind_keys,
        )
        self.game.run()

    def _bind_keys(self, handler: KeyHandler) -> None:
        self._key_handler = handler

    # ---------- loop ----------
    def on_draw(self) -> None:
        self.clear()
        self.surface.draw()

    # ---------- input ----------
    def on_key_press(self, symbol: int, modifiers: int) -> None:
        if self._key_handler is not None:
            self._key_handler(key_name(symbol))

    def on_close(self) -> None:
        self.log.info("window_close")
        super().on_close()
