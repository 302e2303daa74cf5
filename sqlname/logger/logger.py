"""
sqlname.logger.logger

Minimal logger for the name helpers. Writes to stderr via a single handler.
Each record is prefixed with the calling module path and function so that
parse decisions can be traced back to the adapter code that asked for them.
"""

import inspect
import logging
import os
from enum import IntEnum
from pathlib import Path

LOGGER_NAME = "sqlname"


class LOG_LEVEL(IntEnum):
    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    CRITICAL = 50


def get_log_level_from_env(default: LOG_LEVEL = LOG_LEVEL.INFO) -> LOG_LEVEL:
    """
    Read log level from environment variable LOG_LEVEL.
    Supports names (DEBUG, INFO, etc.) or integers.
    Prints a warning if an invalid value is provided.
    """
    raw = os.getenv("LOG_LEVEL")
    if raw is None:
        return default

    raw = raw.strip()

    if raw.isdigit():
        try:
            return LOG_LEVEL(int(raw))
        except ValueError:
            print(f"[WARN] Unknown numeric log level: {raw}. Falling back to default: {default.name}")
            return default

    try:
        return LOG_LEVEL[raw.upper()]
    except KeyError:
        print(f"[WARN] Unknown log level: {raw}. Falling back to default: {default.name}")
        return default


def _get_caller_path(levels: int = 3) -> str:
    # 0: this function, 1: _log, 2: log_<level>, 3: the caller
    frame = inspect.stack()[3]
    short_path = "/".join(Path(frame.filename).parts[-levels:])
    return f"{short_path}:{frame.function}"


def get_logger(level: LOG_LEVEL | int | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    # always reset level to whatever the caller passed
    logger.setLevel(level if level is not None else get_log_level_from_env())
    return logger


def _log(level: LOG_LEVEL, message: str | None = None):
    logger = get_logger()
    if not logger.isEnabledFor(level):
        return
    msg = f" - {message}" if message else ""
    logger.log(level, f"{_get_caller_path()}{msg}")


# Public logging API.
def log_debug(msg: str | None = None):
    _log(LOG_LEVEL.DEBUG, msg)


def log_warning(msg: str | None = None):
    _log(LOG_LEVEL.WARN, msg)
