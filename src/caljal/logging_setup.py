import logging
from logging.handlers import RotatingFileHandler
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: int = logging.WARNING,
    console: bool = True,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_level: Optional[int] = None,
    file_max_bytes: int = 5_000_000,
    file_backup_count: int = 3,
) -> None:
    """
    Configure root logging once. Called by the CLI entry point.

    - Library modules never call this; they use `logging.getLogger(__name__)`.
    - Adds a console handler and an optional rotating file handler.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(level)

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count
        )
        fh.setLevel(file_level if file_level is not None else level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    _configured = True
    logging.getLogger(__name__).debug("Logging initialised (level=%s)", logging.getLevelName(level))
