"""Logger configuration bootstrap.

Every module logs through ``logging.getLogger(__name__)``; all of them sit
below the ``twilio_browse`` logger configured here.  Console records are
rendered by Rich on stderr so they never interleave with prompt output on
stdout.  An optional rotating file handler captures full DEBUG detail.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Any

from twilio_browse.exceptions import EnvironmentError

LOGGER_NAME: str = "twilio_browse"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _load_rich_handler() -> tuple[type[Any], type[Any]]:
    """Return ``(RichHandler, Console)`` or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return RichHandler, Console


def setup_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return the application logger.

    Parameters
    ----------
    verbose:
        Show DEBUG records on the console instead of WARNING and above.
    log_file:
        When given, also write DEBUG records to a rotating log file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler_class, console_class = _load_rich_handler()
    console_handler = handler_class(
        console=console_class(stderr=True),
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved = Path(log_file).expanduser().resolve()
        resolved.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            resolved,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
