# logger_utils.py - leveled logging to the console (via rich) and an optional log file, plus timing

import os
import time
from datetime import datetime
from typing import Optional

from rich.console import Console

# Numeric weights used to filter messages below the configured level
LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


class Log:
    """Lightweight logger for writing messages and timing blocks of work."""
    COLORS = {
        "DEBUG": "bright_black",
        "INFO": "blue",
        "WARNING": "yellow",
        "ERROR": "red",
    }

    def __init__(self, path: Optional[str] = None, level: str = "INFO",
                 use_color: bool = True, console: Optional[Console] = None):
        self.path = path
        self.level = self._check_level(level)
        self.use_color = use_color
        # stderr keeps generated text on stdout clean
        self.console = console or Console(stderr=True, emoji=False)

    @staticmethod
    def _check_level(level: str) -> str:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        return level

    def set_level(self, level: str):
        self.level = self._check_level(level)

    def is_enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def write(self, level: str, msg: str):
        """
        Emit one log line if `level` passes the threshold.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if not self.is_enabled_for(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        # Write to the log file, if one is configured
        if self.path:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        # markup/highlight/emoji off so tokens like "[x]" or ":cat:" print verbatim
        style = self.COLORS[level] if self.use_color else None
        self.console.print(line, style=style, markup=False, highlight=False, emoji=False)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def time_block(self, label: str):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("build_chain"):
                do_some_work()
        The duration is logged at DEBUG level when the block exits.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.duration = round(time.perf_counter() - self.start, 3)
        self.log.debug(f"{self.label} done in {self.duration}s")


# Shared instance; configure() mutates it so module-level references stay valid
_LOG = Log()


def get_logger() -> Log:
    return _LOG


def configure(level: Optional[str] = None, path: Optional[str] = None,
              use_color: Optional[bool] = None) -> Log:
    """Adjust the shared logger (used by the CLI once flags/config are known)."""
    if level is not None:
        _LOG.set_level(level)
    if path is not None:
        _LOG.path = path or None
    if use_color is not None:
        _LOG.use_color = use_color
    return _LOG
