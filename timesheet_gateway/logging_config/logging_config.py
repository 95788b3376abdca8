import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty third-party loggers, kept to warnings
QUIET_LOGGERS = ("googleapiclient.discovery", "google.auth.transport.requests", "urllib3")


def _rotating_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(log_dir: Union[str, Path], app_name: str = "timesheet-gateway") -> None:
    """Configure application logging

    Sends INFO and above to the console and to {app_name}.log, and errors
    also to {app_name}-error.log, both under log_dir. Calling it again
    replaces the handlers instead of duplicating them.

    Args:
        log_dir: Directory for the log files, created if missing
        app_name: Name to use for log files

    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.addHandler(_rotating_handler(log_dir / f"{app_name}.log", logging.INFO))
    root_logger.addHandler(_rotating_handler(log_dir / f"{app_name}-error.log", logging.ERROR))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
