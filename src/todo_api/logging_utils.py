"""Root logger configuration shared by the server entry points."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once. Later calls only adjust the level so that
    handlers installed by uvicorn or pytest are left alone.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=_LOG_FORMAT, datefmt=_DATE_FORMAT)
    resolved = logging.getLevelName(level.upper())
    root_logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
