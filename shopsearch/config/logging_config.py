# shopsearch/config/logging_config.py

"""Per-run log files for shopsearch.

Every launch gets ``<LOGS_DIR>/run_YYYYMMDD_HHMMSS.log``. The file keeps
everything from the ``shopsearch.*`` loggers at DEBUG, which includes
dropped stale responses and failed detail lookups the UI never shows.
Only ``Settings.CONSOLE_LOG_LEVEL`` and above reach stderr so the TUI and
piped JSON output stay clean. When serving, uvicorn's loggers are routed
into the same file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from shopsearch.config.settings import Settings

ROOT_LOGGER_NAME = "shopsearch"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_level() -> int:
    level = logging.getLevelName(Settings.CONSOLE_LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.WARNING


def _run_log_path() -> Path:
    logs_dir = Path(Settings.LOGS_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return logs_dir / f"run_{stamp}.log"


def setup_logging(include_server: bool = False) -> Path:
    """Attach the run file and stderr handlers to the ``shopsearch`` logger.

    Args:
        include_server: Also send uvicorn's access and error logs to the
            run file (used by ``--serve``).

    Returns:
        The log file for this run. Repeated calls keep the existing
        handlers and only return a fresh path.
    """
    log_file = _run_log_path()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    if include_server:
        for name in Settings.SERVER_LOGGERS:
            logging.getLogger(name).addHandler(file_handler)

    root_logger.info("Logging to %s", log_file)
    return log_file
