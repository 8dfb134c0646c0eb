from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

FALLBACK_LOG_NAME = "pixarch-install.log"

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_COLORS = {
    logging.ERROR: "\033[0;31m",
    logging.WARNING: "\033[0;33m",
    logging.INFO: "\033[0;32m",
    logging.DEBUG: "\033[0;36m",
}
_RESET = "\033[0m"


def default_log_path() -> str:
    return f"/tmp/pixarch-install-{datetime.now().strftime('%Y%m%d-%H%M%S')}.log"


class ErrorCounter(logging.Handler):
    """Counts ERROR (and above) records; backs the summary's error total."""

    def __init__(self) -> None:
        super().__init__(level=logging.ERROR)
        self.count = 0

    def emit(self, record: logging.LogRecord) -> None:
        self.count += 1


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        color = _COLORS.get(record.levelno)
        if not color:
            return msg
        return f"{color}{msg}{_RESET}"


@dataclass(frozen=True)
class LoggingSetup:
    requested_path: str
    log_path: str
    errors: ErrorCounter


def configure_logging(
    log_path: str,
    *,
    verbose: bool = False,
    quiet: bool = False,
    also_console: bool = True,
) -> LoggingSetup:
    """Configure logging for one installer run.

    The log file always receives every record at the run's level. The console
    shows the same records unless quiet, in which case only errors get through.

    If the requested file cannot be opened we fall back to a file in the
    current working directory and report both paths.

    Calling this again replaces the handlers installed by the previous call.
    """

    root = logging.getLogger()
    for h in list(getattr(root, "_pixarch_handlers", [])):
        root.removeHandler(h)
        h.close()

    level = logging.DEBUG if verbose else logging.INFO
    root.setLevel(level)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    chosen_path = log_path
    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    except OSError:
        chosen_path = str(Path.cwd() / FALLBACK_LOG_NAME)
        file_handler = logging.FileHandler(chosen_path, mode="w", encoding="utf-8")
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stderr)
        if sys.stderr.isatty():
            console.setFormatter(ColorFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        else:
            console.setFormatter(fmt)
        if quiet:
            console.setLevel(logging.ERROR)
        handlers.append(console)

    errors = ErrorCounter()
    handlers.append(errors)

    for h in handlers:
        root.addHandler(h)
    setattr(root, "_pixarch_handlers", handlers)

    if chosen_path != log_path:
        logging.getLogger(__name__).warning(
            "Could not open log file %s; logging to %s instead", log_path, chosen_path
        )
    return LoggingSetup(requested_path=log_path, log_path=chosen_path, errors=errors)
