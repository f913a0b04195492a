# src/gridwalk/utils/logger.py
import logging
import os
from typing import Optional


def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def _default_level() -> int:
    name = os.environ.get("GRIDWALK_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str,
               file_path: Optional[str] = None,
               level: Optional[int] = None) -> logging.Logger:
    """
    Logger con formateo consistente. Si no se pasa file_path, escribe en
    <GRIDWALK_LOG_DIR|logs>/gridwalk/gridwalk.log.
    """
    if file_path is None:
        log_dir = os.path.join(os.environ.get("GRIDWALK_LOG_DIR", "logs"), "gridwalk")
        _ensure_dir(log_dir)
        file_path = os.path.join(log_dir, "gridwalk.log")
    elif os.path.dirname(file_path):
        _ensure_dir(os.path.dirname(file_path))

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger  # ya configurado

    if level is None:
        level = _default_level()
    logger.setLevel(level)
    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(file_path, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    logger.propagate = False
    return logger
