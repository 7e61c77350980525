"""
debug.py - Logging facade for the Connect Four core

Every module logs through the ``debug`` singleton defined here, tagging each
message with a component name ("board", "engine", "cli") so output can be
narrowed to one part of the game while troubleshooting.
"""

import logging
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Python logging has no TRACE level, so one is registered just below DEBUG
TRACE = logging.DEBUG - 5
logging.addLevelName(TRACE, "TRACE")

LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE,
}

LOGGER_NAME = "connectfour"
CONSOLE_HANDLER_NAME = "connectfour-console"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DebugManager:
    """Routes component-tagged messages to the ``connectfour`` logger."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._components: Set[str] = set()  # Empty set means all components
        self._file_handler: Optional[logging.FileHandler] = None
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(LEVEL_MAP[self._level])

        # Re-importing the module must not stack console handlers
        if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
            handler.set_name(CONSOLE_HANDLER_NAME)
            logger.addHandler(handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None) -> None:
        """
        Configure the debug manager settings.

        Args:
            level: Debug level to set
            enabled: Whether logging is enabled at all
            log_file: Path of a file to mirror log output to ("" disables it)
            components: Components to log for (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            if self._file_handler is not None:
                self._logger.removeHandler(self._file_handler)
                self._file_handler.close()
                self._file_handler = None
            if log_file:
                self._file_handler = logging.FileHandler(log_file)
                self._file_handler.setFormatter(
                    logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
                self._logger.addHandler(self._file_handler)

        if components is not None:
            self._components = set(components)

    def is_enabled_for(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        if not self._enabled or level == DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        if component and self._components and component not in self._components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        if not self.is_enabled_for(level, component):
            return
        if component:
            message = f"[{component}] {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.TRACE, message, component)

    # Performance tracking
    def start_timer(self, marker: str) -> None:
        self._timers[marker] = time.perf_counter()

    def end_timer(self, marker: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a timer and log the elapsed time at trace level.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(marker, None)
        if started is None:
            self.warning(f"Timer '{marker}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"{marker} took {elapsed * 1000:.3f} ms", component)
        return elapsed

    @contextmanager
    def timed(self, marker: str, component: Optional[str] = None) -> Iterator[None]:
        self.start_timer(marker)
        try:
            yield
        finally:
            self.end_timer(marker, component)

    def set_from_string(self, level_str: str) -> DebugLevel:
        """Set the level from a command line value such as "info" or "TRACE"."""
        try:
            level = DebugLevel[level_str.strip().upper()]
        except KeyError:
            choices = ", ".join(lvl.name.lower() for lvl in DebugLevel)
            raise ValueError(f"Unknown debug level {level_str!r} (choose from {choices})") from None
        self.configure(level=level)
        return level


debug = DebugManager()
