# src/gridwalk/world/game.py
"""
Bucle de juego:
- init(): coloca al jugador, construye el grid y registra el manejador de teclas.
- run(): init + un render + timer cada 1/steps_in_second segundos.
- Cada tick: si la siguiente celda está dentro del grid, paso + render; si no, se salta.

Timer y teclado son dos fuentes de eventos que comparten un único hilo
(el event loop de arcade): los callbacks nunca se solapan, así que el
"comprobar límites → dar paso" del tick no se intercala con un cambio de
dirección.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from gridwalk.utils.logger import get_logger
from .controls import direction_for_key
from .grid import in_bounds
from .player import Player
from .renderer import DisplaySurface, GridRenderer
from .settings import SETTINGS, GameSettings

KeyHandler = Callable[[object], None]
# scheduler(callback(dt), interval_seconds); p.ej. arcade.schedule
Scheduler = Callable[[Callable[[float], None], float], None]
KeyBinder = Callable[[KeyHandler], None]


class GameStatus(Enum):
    UNINITIALIZED = auto()
    RUNNING = auto()


@dataclass
class GameState:
    settings: GameSettings
    player: Player
    renderer: GridRenderer
    status: GameStatus = GameStatus.UNINITIALIZED
    ticks: int = 0
    steps: int = 0


class Game:
    def __init__(
        self,
        settings: GameSettings = SETTINGS,
        surface: Optional[DisplaySurface] = None,
        scheduler: Optional[Scheduler] = None,
        key_binder: Optional[KeyBinder] = None,
    ) -> None:
        self.state = GameState(
            settings=settings,
            player=Player(),
            renderer=GridRenderer(surface),
        )
        self._scheduler = scheduler
        self._key_binder = key_binder
        self._keys_bound = False
        self.log = get_logger("gridwalk.game")

    @property
    def settings(self) -> GameSettings:
        return self.state.settings

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def renderer(self) -> GridRenderer:
        return self.state.renderer

    @property
    def is_running(self) -> bool:
        return self.state.status is GameStatus.RUNNING

    # ---------- ciclo de vida ----------
    def init(self) -> None:
        s = self.settings
        self.player.init(s.start_x, s.start_y, s.start_direction)
        self.renderer.build(s.rows_count, s.cols_count)
        if self._key_binder is not None and not self._keys_bound:
            self._key_binder(self.on_key_down)
            self._keys_bound = True
        self.log.info(
            f"init container={s.container_id} grid={s.cols_count}x{s.rows_count} "
            f"start=({s.start_x},{s.start_y}) "
            f"dir={s.start_direction.value}"
        )

    def run(self) -> None:
        if self.is_running:
            raise RuntimeError("Game is already running")
        self.init()
        self.render()
        if self._scheduler is not None:
            self._scheduler(self._on_timer, self.settings.tick_interval)
        self.state.status = GameStatus.RUNNING
        self.log.info(f"run interval_ms={self.settings.tick_interval_ms:.1f}")

    # ---------- loop ----------
    def can_step(self) -> bool:
        """True si la celda siguiente del jugador está dentro del grid."""
        if self.player.direction is None:
            return False
        next_cell = self.player.compute_next_position()
        return in_bounds(next_cell, self.settings.cols_count, self.settings.rows_count)

    def tick(self) -> bool:
        self.state.ticks += 1
        if not self.can_step():
            self.log.debug(
                f"step_blocked at={self.player.position} "
                f"dir={self.player.direction.value if self.player.direction else None}"
            )
            return False
        self.player.step()
        self.state.steps += 1
        self.render()
        return True

    def _on_timer(self, dt: float) -> None:
        self.tick()

    def render(self) -> None:
        s = self.settings
        self.renderer.render(self.player.x, self.player.y, s.empty_cell_color, s.player_cell_color)

    # ---------- input ----------
    def on_key_down(self, key: object) -> None:
        direction = direction_for_key(key)
        if direction is None:
            return
        if self.player.set_direction(direction):
            self.log.info(f"direction key={key} dir={direction.value}")
