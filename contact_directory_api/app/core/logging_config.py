"""
Logging configuration for the contact directory.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger.  Request handlers and the
store log through ``logging.getLogger(__name__)``, so their records
carry the module name, e.g.
``contact_directory_api.app.api.v1.endpoints.contacts``.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by uvicorn or by an earlier
        # ``create_app`` call in the same test session.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
