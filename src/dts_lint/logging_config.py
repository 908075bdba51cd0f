"""Logging for dts-lint.

Everything logs under the "dts_lint" namespace to stderr so that reports
printed on stdout stay machine-readable.
"""
import logging
import os
import sys

ROOT_LOGGER = "dts_lint"
LOG_LEVEL_ENV = "DTS_LINT_LOG_LEVEL"

_BRIEF_FORMAT = "%(levelname)s: %(message)s"
_VERBOSE_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _level_from_env() -> int | None:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else None


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the dts_lint logger.

    DTS_LINT_LOG_LEVEL (e.g. "DEBUG") takes precedence over the flags.

    Args:
        verbose: Log each pass and compiler run (INFO level)
        quiet: Only log errors
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    level = _level_from_env() or level

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_VERBOSE_FORMAT if level < logging.WARNING else _BRIEF_FORMAT))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'dts_lint.')

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
