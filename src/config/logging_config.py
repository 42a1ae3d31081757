# src/config/logging_config.py

"""Per-run logging for the storefront.

Every launch writes to its own ``logs/run_<timestamp>.log`` file. All
``storefront.*`` loggers share that file handler, so the fetch, the cart
and the UI end up in one log per session.

The console handler is optional: while the Textual UI owns the terminal,
writing to stderr would corrupt the screen, so the TUI runs file-only.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

ROOT_LOGGER_NAME = "storefront"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _log_file_path(logs_dir: Path) -> Path:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return logs_dir / f"run_{stamp}.log"


def setup_logging(
    logs_dir: Path | None = None,
    console: bool = True,
) -> Path:
    """Configure the ``storefront`` logger for this run.

    Args:
        logs_dir: Directory for the run log. Defaults to
            ``Settings.LOGS_DIR``.
        console: Also echo WARNING and above to stderr.

    Returns:
        Path of the log file for this run. Repeated calls keep the
        handlers installed by the first call.
    """
    target_dir = logs_dir or Settings.LOGS_DIR
    target_dir.mkdir(parents=True, exist_ok=True)
    log_file = _log_file_path(target_dir)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    existing = [
        h for h in root_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    if existing:
        return Path(existing[0].baseFilename)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    root_logger.info(
        "Logging initialised (console=%s) - log file: %s",
        console,
        log_file,
    )
    return log_file
