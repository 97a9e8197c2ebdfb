# src/tasklist/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "tasklist.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Minimum level a logger family needs to reach the console.
# Anything not listed here (and not ours) needs ERROR.
CONSOLE_THRESHOLDS: dict[str, int] = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}


class _ConsoleNoiseFilter(logging.Filter):
    """Keep the rendered task table readable: only tasklist logs pass freely."""

    def filter(self, record: logging.LogRecord) -> bool:
        family = record.name.split(".", 1)[0]
        if family == "tasklist":
            return True
        return record.levelno >= CONSOLE_THRESHOLDS.get(family, logging.ERROR)


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasklist",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Send filtered logs to stderr and everything to `<log_dir>/tasklist.log`.

    Replaces existing root handlers, so call it once from the entrypoint.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    log_file = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
    log_file.setLevel(file_level)
    log_file.setFormatter(fmt)
    root.addHandler(log_file)

    # warnings.warn(...) arrives as 'py.warnings', which needs ERROR on the console.
    logging.captureWarnings(True)
