"""Optional trace file for diffy-setup runs.

Each run can record which prompts were shown, which workflow steps
completed and every HTTP call made to Diffy, GitHub and CircleCI. Only
the method, URL and status code of a call are recorded. Keys and tokens
never reach the trace.

The trace is off unless DIFFY_SETUP_LOG=true. DIFFY_SETUP_LOG_FILE
overrides the default location, ~/.diffy-setup.log.
"""

import logging
import os
from pathlib import Path

LOG_ENABLED = os.environ.get("DIFFY_SETUP_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("DIFFY_SETUP_LOG_FILE", str(Path.home() / ".diffy-setup.log")))

_logger: logging.Logger | None = None


def _trace_handler() -> logging.Handler:
    if not LOG_ENABLED:
        return logging.NullHandler()
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(LOG_FILE)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    return handler


def setup_logging() -> logging.Logger:
    """Attach the trace handler to the package logger once per process."""
    global _logger
    if _logger is None:
        logger = logging.getLogger("diffy_setup")
        logger.handlers.clear()
        logger.addHandler(_trace_handler())
        if LOG_ENABLED:
            logger.setLevel(logging.INFO)
        _logger = logger
    return _logger


def get_logger() -> logging.Logger:
    return _logger or setup_logging()


def log_message(message: str) -> None:
    """Record one line in the trace. Callers must not pass secrets."""
    get_logger().info(message)


def log_request(method: str, url: str, status_code: int | None = None) -> None:
    """Record an outgoing API call.

    A missing status code means the request failed before a usable
    response arrived (connection error, timeout or undecodable body).
    """
    status = status_code if status_code is not None else "no response"
    log_message(f"HTTP: {method} {url} | STATUS: {status}")


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_request",
]
