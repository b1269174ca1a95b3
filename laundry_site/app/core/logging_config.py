"""
Logging configuration for the site.

``setup_logging`` configures the root logger with a console and
optional file handler.  Requests are recorded by ``log_request`` on the
``laundry_site.access`` logger, one line per request with the method
and the path as requested (query string included).  Uvicorn's own
access logger is turned down so a request is never recorded twice.
"""

import logging
from pathlib import Path
from typing import List, Optional

ACCESS_LOGGER = "laundry_site.access"
SERVER_ACCESS_LOGGER = "uvicorn.access"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the site.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file that receives a copy of every log line.
    """
    # The server's per-request lines duplicate ours; keep only its warnings.
    logging.getLogger(SERVER_ACCESS_LOGGER).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in _build_handlers(logfile):
        root.addHandler(handler)


def request_target(path: str, query: str = "") -> str:
    """Path as the client sent it, e.g. ``/about?ref=home``."""
    return f"{path}?{query}" if query else path


def log_request(method: str, path: str, query: str = "") -> None:
    logging.getLogger(ACCESS_LOGGER).info("%s %s", method, request_target(path, query))
