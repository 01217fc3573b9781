"""Logging setup for subway.

subway is a library: importing it only attaches a ``NullHandler`` to the
``subway`` logger and leaves its level unset, so records flow to whatever the
host application configured. ``setup_root_logger()`` and the level helpers
are explicit opt-ins for scripts that want subway to print on its own.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "subway"

# Set once setup_root_logger() has installed an output handler
_ROOT_LOGGER_CONFIGURED = False


def _install_null_handler() -> None:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in root_logger.handlers):
        root_logger.addHandler(logging.NullHandler())


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Opt in to subway's own output handler.

    Replaces the handlers on the ``subway`` logger with a single formatted
    handler. Repeated calls are no-ops until ``reset_logging()``.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a subway module.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.
    """
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``subway`` logger and any handlers attached to it.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Print subway's DEBUG output, installing the default handler if needed."""
    setup_root_logger(level=logging.DEBUG)
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Drop subway back to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Return to the import-time state: NullHandler only, no level."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    _install_null_handler()


_install_null_handler()
