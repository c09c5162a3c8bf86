"""
Root logger setup for the Academy API.

``create_app`` calls :func:`setup_logging` with ``settings.log_level``
and ``settings.log_file`` (the ``LOG_LEVEL`` and ``LOG_FILE`` environment
variables). Service and endpoint modules log through
``logging.getLogger(__name__)`` and inherit whatever is configured here.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send academy log records to stderr and, if ``logfile`` is set, to a file.

    Leaves the root logger alone when it already has handlers, so uvicorn,
    pytest or a repeated ``create_app`` keep their own configuration.
    An unknown ``level`` name falls back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
