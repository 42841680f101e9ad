"""
Logging helpers for routekit.

Thin layer over the standard ``logging`` module that gives the CLI four verbosity
levels, coloured single-line output and a ``tqdm`` step tracker. Library modules
obtain their logger through ``RoutekitLogger.get_logger(__name__)``.
"""

import logging
import os
import sys
from enum import Enum

from tqdm import tqdm

LOG_LEVEL_ENV = "ROUTEKIT_LOG_LEVEL"
EFFECTIVE_LOG_LEVEL_ENV = "ROUTEKIT_EFFECTIVE_LOG_LEVEL"


class LogLevel(Enum):
    """Verbosity levels exposed on the command line."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class Colors:
    """ANSI colour codes."""

    GRAY = "\033[90m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


class Symbols:
    """Unicode symbols for logging."""

    CHECK = "✓"
    CROSS = "✗"
    GEAR = "⚙"
    WARNING = "⚠"
    PIN = "📍"
    ROCKET = "🚀"


_PYTHON_LEVELS = {
    LogLevel.QUIET: logging.ERROR,
    LogLevel.NORMAL: logging.INFO,
    LogLevel.VERBOSE: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class SimpleFormatter(logging.Formatter):
    """Colour the whole message according to its level."""

    COLORS = {
        "DEBUG": Colors.GRAY,
        "INFO": Colors.CYAN,
        "WARNING": Colors.YELLOW,
        "ERROR": Colors.RED,
        "CRITICAL": Colors.RED + Colors.BOLD,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        return f"{color}{record.getMessage()}{Colors.RESET}"


class RoutekitLogger:
    """Process-wide verbosity switch plus a cache of configured loggers."""

    _current_level: LogLevel = LogLevel.NORMAL
    _loggers: dict[str, logging.Logger] = {}

    @classmethod
    def set_level(cls, level: LogLevel) -> None:
        cls._current_level = level
        for logger in cls._loggers.values():
            cls._configure_logger(logger)

    @classmethod
    def get_level(cls) -> LogLevel:
        return cls._current_level

    @classmethod
    def _effective_level(cls) -> LogLevel:
        # Worker processes spawned by joblib inherit the level through the environment
        env_level = os.environ.get(EFFECTIVE_LOG_LEVEL_ENV)
        if env_level and env_level.upper() in LogLevel.__members__:
            return LogLevel[env_level.upper()]
        return cls._current_level

    @classmethod
    def _configure_logger(cls, logger: logging.Logger) -> None:
        logger.setLevel(_PYTHON_LEVELS[cls._effective_level()])

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        logger = cls._loggers.get(name)
        if logger is None:
            logger = logging.getLogger(name)
            cls._loggers[name] = logger
        cls._configure_logger(logger)
        return logger

    @classmethod
    def progress(cls, message: str, symbol: str = Symbols.GEAR) -> None:
        if cls._current_level.value >= LogLevel.NORMAL.value:
            cls.get_logger("routekit").info(f"{symbol} {message}")

    @classmethod
    def success(cls, message: str, symbol: str = Symbols.CHECK) -> None:
        if cls._current_level.value >= LogLevel.NORMAL.value:
            cls.get_logger("routekit").info(
                f"{Colors.GREEN}{symbol} {message}{Colors.RESET}"
            )

    @classmethod
    def info(cls, message: str) -> None:
        if cls._current_level.value >= LogLevel.NORMAL.value:
            cls.get_logger("routekit").info(message)

    @classmethod
    def detail(cls, message: str, indent: str = "  ") -> None:
        if cls._current_level.value >= LogLevel.VERBOSE.value:
            cls.get_logger("routekit").info(f"{indent}{message}")

    @classmethod
    def debug(cls, message: str, logger_name: str = "routekit") -> None:
        if cls._current_level.value >= LogLevel.DEBUG.value:
            cls.get_logger(logger_name).debug(message)

    @classmethod
    def warning(cls, message: str, symbol: str = Symbols.WARNING) -> None:
        if cls._current_level.value >= LogLevel.NORMAL.value:
            cls.get_logger("routekit").warning(f"{symbol} {message}")

    @classmethod
    def error(cls, message: str, symbol: str = Symbols.CROSS) -> None:
        cls.get_logger("routekit").error(f"{symbol} {message}")


def suppress_third_party_logs() -> None:
    """Keep chatty dependencies at WARNING and above."""
    for name in ("joblib", "numexpr", "urllib3", "matplotlib", "asyncio"):
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging(level: LogLevel | None = None) -> None:
    """Configure the root handler and the routekit verbosity.

    Without an explicit ``level`` the ``ROUTEKIT_LOG_LEVEL`` environment variable
    is consulted, falling back to ``NORMAL``.
    """
    if level is None:
        env_value = os.environ.get(LOG_LEVEL_ENV, "").upper()
        level = LogLevel[env_value] if env_value in LogLevel.__members__ else LogLevel.NORMAL

    os.environ[EFFECTIVE_LOG_LEVEL_ENV] = level.name
    RoutekitLogger.set_level(level)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(SimpleFormatter())
    root.addHandler(handler)
    root.setLevel(_PYTHON_LEVELS[level])

    suppress_third_party_logs()


class ProgressTracker:
    """Step-wise progress bar; silent in QUIET mode."""

    def __init__(self, steps: list[str]):
        self.steps = steps
        self.current = 0
        self.pbar = None
        if RoutekitLogger.get_level() != LogLevel.QUIET:
            self.pbar = tqdm(
                total=len(steps),
                desc=f"{Colors.CYAN}Planning{Colors.RESET}",
                bar_format="{desc}: {percentage:3.0f}%|{bar:30}| {n_fmt}/{total_fmt}",
            )

    def advance(self, message: str | None = None, status: str = "success") -> None:
        if self.pbar is None:
            return
        if message:
            symbol = Symbols.CHECK if status == "success" else Symbols.CROSS
            color = Colors.GREEN if status == "success" else Colors.RED
            self.pbar.write(f"{color}{symbol} {message}{Colors.RESET}")
        self.current += 1
        self.pbar.update(1)

    def close(self) -> None:
        if self.pbar is None:
            return
        self.pbar.write(f"{Colors.GREEN}{Symbols.ROCKET} Done{Colors.RESET}")
        self.pbar.close()


def log_progress(message: str) -> None:
    RoutekitLogger.progress(message, Symbols.GEAR)


def log_success(message: str) -> None:
    RoutekitLogger.success(message, Symbols.CHECK)


def log_info(message: str) -> None:
    RoutekitLogger.info(message)


def log_detail(message: str) -> None:
    RoutekitLogger.detail(message, "  ")


def log_warning(message: str) -> None:
    RoutekitLogger.warning(message, Symbols.WARNING)


def log_error(message: str) -> None:
    RoutekitLogger.error(message, Symbols.CROSS)


def log_debug(message: str, logger_name: str = "routekit") -> None:
    RoutekitLogger.debug(message, logger_name)
