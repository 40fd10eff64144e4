"""
Logging setup for the Showcase API.

``setup_logging`` attaches a console handler (and, when a path is
given, a file handler) to the root logger.  Application modules then
log through ``logging.getLogger(__name__)``.  Uvicorn's per-request
access log is kept at ``WARNING`` unless debug mode is on, so that the
service log mostly contains rejected requests and created users.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file, resolved against the working
        directory.
    debug : bool
        Keep uvicorn's access log at the root level instead of
        silencing it.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest and repeated create_app() calls land here
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if not debug:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
