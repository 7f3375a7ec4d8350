"""
Logging configuration for the catalog view service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once per process.  Upstream fetch failures
are logged by the client and the services; the connection pool used by
``requests`` is kept at WARNING so DEBUG output stays readable.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries whose chatter is not useful below WARNING.
QUIET_LOGGERS = ("urllib3", "urllib3.connectionpool")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of an additional log file.  No file handler when omitted.
    quiet : Iterable[str]
        Logger names capped at WARNING.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    for name in quiet:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    if root.handlers:
        # Handlers already installed (uvicorn, pytest or a second create_app()).
        return

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
