"""
Logging setup shared by every module of the recipes API.

Each call to ``setup_logger(name)`` returns a named logger writing to the
console and to a single size-rotated log file for the current process run
(``logs/<date>/receitas_api_<timestamp>.log``).
"""

import datetime
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_FILE_BASENAME = "receitas_api"

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

MAX_LOG_SIZE_BYTES = 5 * 1024 * 1024
MAX_BACKUP_COUNT = 10
LOG_RETENTION_DAYS = 7

_run_log_file: Path | None = None


def _get_run_log_file() -> Path:
    """All loggers of one process share the same file."""
    global _run_log_file
    if _run_log_file is None:
        now = datetime.datetime.now()
        date_dir = LOG_DIR / now.strftime("%Y-%m-%d")
        date_dir.mkdir(parents=True, exist_ok=True)
        run_timestamp = now.strftime("%Y-%m-%d_%H-%M-%S")
        _run_log_file = date_dir / f"{LOG_FILE_BASENAME}_{run_timestamp}.log"
    return _run_log_file


class SafeRotatingFileHandler(RotatingFileHandler):
    """Rotating handler that keeps writing to the current file if rollover fails."""

    def doRollover(self):
        try:
            super().doRollover()
        except OSError as e:
            sys.stderr.write(
                f"Log rotation failed: {e}. Continuing with current log file.\n"
            )
            sys.stderr.flush()


def _get_log_level(level_str: str) -> int:
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_str.upper(), logging.INFO)


def setup_logger(name: str, level: str = None) -> logging.Logger:
    """Set up logger with both console and file handlers."""
    logger = logging.getLogger(name)
    log_level = _get_log_level(level or DEFAULT_LOG_LEVEL)
    logger.setLevel(log_level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))

    file_handler = SafeRotatingFileHandler(
        _get_run_log_file(),
        maxBytes=MAX_LOG_SIZE_BYTES,
        backupCount=MAX_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    cleanup_old_logs(keep_days=LOG_RETENTION_DAYS)

    return logger


def cleanup_old_logs(keep_days: int = LOG_RETENTION_DAYS) -> int:
    """Delete dated log directories older than ``keep_days``. Returns files removed."""
    if not LOG_DIR.exists():
        return 0

    cutoff = datetime.datetime.now() - datetime.timedelta(days=keep_days)
    deleted_count = 0

    for date_dir in LOG_DIR.iterdir():
        if not date_dir.is_dir():
            continue
        try:
            dir_date = datetime.datetime.strptime(date_dir.name, "%Y-%m-%d")
        except ValueError:
            # Not one of ours
            continue
        if dir_date >= cutoff:
            continue

        for log_file in date_dir.iterdir():
            try:
                log_file.unlink()
                deleted_count += 1
            except (PermissionError, FileNotFoundError):
                continue
        try:
            date_dir.rmdir()
        except OSError:
            pass

    return deleted_count
