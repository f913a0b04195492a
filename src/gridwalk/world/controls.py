# src/gridwalk/world/controls.py
from __future__ import annotations
from typing import Dict, Optional

from .grid import Direction

# Flechas o WASD. Cualquier otra tecla se ignora.
KEY_BINDINGS: Dict[str, Direction] = {
    "UP": Direction.UP,
    "W": Direction.UP,
    "RIGHT": Direction.RIGHT,
    "D": Direction.RIGHT,
    "DOWN": Direction.DOWN,
    "S": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "A": Direction.LEFT,
}


def direction_for_key(key: object) -> Optional[Direction]:
    if not isinstance(key, str):
        return None
    return KEY_BINDINGS.get(key.strip().upper())
