"""Logging helpers for metafilter.

Converters log every produced filter at DEBUG level; registry changes go through
`Logger.message`, which logs at the level configured by `LOG_LEVEL`.
"""

import logging
from typing import Optional

from metafilter.settings import settings as api_settings

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def resolve_level(name: Optional[str]) -> int:
    """Map a level name (any case) to a logging level. Unknown or empty names mean INFO."""
    return _LEVELS.get((name or "").upper(), logging.INFO)


def setup_global_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once in a standardized format.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO"), `LOG_LEVEL` from settings by default
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(level=resolve_level(level or api_settings.LOG_LEVEL), format=_FORMAT)
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a module/class logger. Ensures global logging is configured.

    Args:
        name: Logger name, usually __name__
    """
    return Logger(name or __name__)


class Logger:
    """Thin wrapper over a standard library logger.

    Creating the first `Logger` configures global logging from settings.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        if not _configured:
            setup_global_logging(api_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name or __name__)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs) -> None:
        self._logger.critical(msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        """Log `msg` at the configured LOG_LEVEL, INFO when unset."""
        self._logger.log(resolve_level(api_settings.LOG_LEVEL), msg, *args, **kwargs)
