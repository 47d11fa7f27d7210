# src/project_clock/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

_PACKAGE = "project_clock"

_FORMAT = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """Console shows project_clock records at the handler level, anything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == _PACKAGE or record.name.startswith(_PACKAGE + "."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/pclock",
    log_name: str = "pclock",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send logs to stderr (filtered, WARNING+ by default so command output stays clean)
    and to <log_dir>/<log_name>.log (everything from file_level up).

    Existing root handlers are replaced. Returns the log file path.
    """
    log_file = Path(log_dir) / f"{log_name}.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    console = logging.StreamHandler(sys.stderr)
    console.addFilter(_ConsoleNoiseFilter())

    for handler, level in ((console, console_level), (logging.FileHandler(log_file, encoding="utf-8"), file_level)):
        handler.setLevel(level)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)

    return log_file


def setup_logging_from_settings(settings) -> Path:
    """setup_logging() with directory, file name and console level taken from Settings."""
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = logging.getLevelNamesMapping().get(level_name, logging.WARNING)
    return setup_logging(
        log_dir=getattr(settings, "log_dir", ".local/pclock"),
        log_name=getattr(settings, "app_name", "pclock") or "pclock",
        console_level=console_level,
    )
