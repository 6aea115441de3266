from __future__ import annotations

import logging
import sys


_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEBUG_FMT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(filename)s:%(lineno)d - %(message)s"


def _coerce_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.upper() in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        return getattr(logging, level.upper())
    return logging.INFO


def setup_logging(level: str | int | None = None) -> None:
    """Configure root logging once: a single stderr handler, noisy HTTP loggers quieted."""
    final_level = _coerce_level(level)

    root = logging.getLogger()
    root.setLevel(final_level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    fmt = _DEBUG_FMT if final_level <= logging.DEBUG else _FMT
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)

    for noisy in ("urllib3", "httpx", "openai"):
        logging.getLogger(noisy).setLevel(max(final_level, logging.WARNING))
