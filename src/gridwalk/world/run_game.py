# src/gridwalk/world/run_game.py
from __future__ import annotations
import os

import arcade

from gridwalk.utils.loader import load_settings
from gridwalk.world.settings import SETTINGS
from .scene import GameWindow


def main(config_path: str | None = None) -> None:
    config_path = config_path or os.environ.get("GRIDWALK_CONFIG")
    settings = load_settings(config_path) if config_path else SETTINGS
    GameWindow(settings)
    arcade.run()


if __name__ == "__main__":
    main()
