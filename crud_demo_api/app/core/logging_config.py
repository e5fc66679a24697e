"""
Logging configuration shared by the server and the command line client.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  Level and file default to
``settings.log_level`` and ``settings.log_file`` so ``run.py`` and
``python crud_demo_client.py`` write to the same place without passing
anything.

Handlers added here are named with ``HANDLER_PREFIX``; a second call is
a no-op only if those handlers are already attached.  Handlers installed
by other code (pytest's capture handler, uvicorn's) do not count.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import settings

HANDLER_PREFIX = "crud_demo"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : Optional[str]
        Logging level name, case insensitive.  Defaults to
        ``settings.log_level``; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to log to.  Defaults to ``settings.log_file``; an
        empty value means console only.
    """
    root = logging.getLogger()
    if _own_handlers(root):
        return

    level_name = level or settings.log_level
    root.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(f"{HANDLER_PREFIX}.console")
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_path = logfile or settings.log_file
    if log_path:
        file_handler = logging.FileHandler(Path(log_path).resolve(), encoding="utf-8")
        file_handler.set_name(f"{HANDLER_PREFIX}.file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def teardown_logging() -> None:
    """Detach and close the handlers added by ``setup_logging``."""
    root = logging.getLogger()
    for handler in _own_handlers(root):
        root.removeHandler(handler)
        handler.close()
