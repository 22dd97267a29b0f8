"""
Logging setup for the service.

Everything logs through the standard library.  The root logger gets a
console handler and, when ``LOG_FILE`` is set, a file handler.  The
HTTP stack underneath ``requests`` logs every connection at DEBUG; it
is held at WARNING unless the service itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries whose connection chatter drowns out request logs.
NOISY_LOGGERS = ("urllib3", "httpx")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, INFO if unknown."""
    numeric_level = getattr(logging, level.upper(), None)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Later calls are ignored while the root logger has handlers, so
    building the app twice (tests) does not duplicate output.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)
    for handler in _build_handlers(logfile):
        root.addHandler(handler)

    library_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
