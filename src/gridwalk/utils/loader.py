# src/gridwalk/utils/loader.py
from __future__ import annotations
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

import json
import yaml

from gridwalk.utils.logger import get_logger
from gridwalk.world.grid import Direction
from gridwalk.world.settings import GameSettings

log = get_logger("gridwalk.loader")

_FIELDS = {f.name for f in fields(GameSettings)}


# ---- helpers de validación/normalización ----

def _read_raw(p: Path) -> Dict[str, Any]:
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() == ".json":
        data = json.loads(text) if text.strip() else {}
    else:
        data = yaml.safe_load(text)
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}: {p}")
    return data


def settings_from_dict(data: Dict[str, Any]) -> GameSettings:
    """Construye GameSettings a partir de un dict; claves desconocidas se ignoran."""
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in _FIELDS:
            log.warning(f"config_unknown_key key={key!r} (ignored)")
            continue
        kwargs[key] = value

    if "start_direction" in kwargs:
        direction = Direction.parse(kwargs["start_direction"])
        if direction is None:
            raise ValueError(f"Invalid start_direction: {kwargs['start_direction']!r}")
        kwargs["start_direction"] = direction

    return GameSettings(**kwargs)


# ---- API pública ----

def load_settings(path: str | Path) -> GameSettings:
    """
    Carga la configuración del juego desde YAML (.yaml/.yml) o JSON (.json).
    Las claves son los nombres de campo de GameSettings; lo que falte toma el valor por defecto.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    settings = settings_from_dict(_read_raw(p))
    log.info(
        f"settings_load_ok grid={settings.cols_count}x{settings.rows_count} "
        f"start=({settings.start_x},{settings.start_y}) dir={settings.start_direction.value} "
        f"steps_per_sec={settings.steps_in_second} from={p}"
    )
    return settings
