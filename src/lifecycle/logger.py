# lifecycle/logger.py
"""Harness logger.

Exposes:
  LOGGER    — standard Python logger shared by the harness and unit bodies
  LogStream — Register/Unregister extra streams, used to capture per-unit output
  set_level — change what reaches stderr without affecting captured streams
  resolve_level — validate a level name, falling back to the default
"""

import itertools
import logging
import sys

from core.config import CAPTURE_FORMAT, LOG_FORMAT, LOG_LEVEL, LOG_LEVEL_DEFAULT, LOG_LEVEL_ENV


def resolve_level(level, default: str = LOG_LEVEL_DEFAULT):
    """Returns level if logging knows it, else default.

    Accepts a name like 'debug' or a logging constant.
    """
    if isinstance(level, int):
        return level
    name = str(level).upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return default


LOGGER = logging.getLogger("recipe_hooks")
LOGGER.setLevel(logging.DEBUG)

_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter(LOG_FORMAT))
_handler.setLevel(resolve_level(LOG_LEVEL))
LOGGER.addHandler(_handler)
if resolve_level(LOG_LEVEL) != LOG_LEVEL:
    LOGGER.warning(f"Unknown log level {LOG_LEVEL!r} in {LOG_LEVEL_ENV}, using {LOG_LEVEL_DEFAULT}")


def set_level(level) -> None:
    """Sets the stderr threshold (name like 'DEBUG' or a logging constant)."""
    _handler.setLevel(level.upper() if isinstance(level, str) else level)


class LogStream:
    """Registers a stream so that it receives log messages.

    The runner registers a StringIO around every unit so each result carries the
    log lines emitted while that unit was running.
    """

    __STREAMS: dict[int, logging.Handler] = {}
    __ID = itertools.count()

    @classmethod
    def Register(cls, stream, fmt: str = CAPTURE_FORMAT) -> int:
        """Attach stream to LOGGER. Returns an ID for Unregister."""
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        LOGGER.addHandler(handler)
        _id = next(cls.__ID)
        cls.__STREAMS[_id] = handler
        return _id

    @classmethod
    def Unregister(cls, _id: int) -> None:
        """Detach the stream registered under _id."""
        handler = cls.__STREAMS.pop(_id, None)
        if handler:
            LOGGER.removeHandler(handler)
            handler.flush()
