"""Logging setup for applications embedding markrender.

Library modules only call ``logging.getLogger(__name__)``. Nothing inside the
package installs handlers; an application that wants to see the renderer's
fallback messages calls :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "markrender"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: int | str) -> int:
    """Return a numeric level for an int or a level name; unknown names map to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    *,
    package_only: bool = False,
) -> logging.Logger:
    """Install console (and optionally file) handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG" to see unknown-node
        fallbacks, "WARNING" for highlighter failures only).
    log_file : str, optional
        Path of a file that receives the same records as the console.
    trace_mode : bool, default False
        Include timestamps and logger names, which tell the parser, renderer
        and highlighter messages apart.
    package_only : bool, default False
        Configure the ``markrender`` logger instead of the root logger. The
        package logger then stops propagating so records are not printed twice.

    Returns
    -------
    logging.Logger
        The configured logger.

    """
    level = resolve_log_level(log_level)
    target = logging.getLogger(PACKAGE_LOGGER_NAME if package_only else None)
    target.setLevel(level)
    target.handlers.clear()
    if package_only:
        target.propagate = False

    formatter = _build_formatter(trace_mode)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            target.addHandler(_prepare(handlers[0], level, formatter))
            target.warning("Could not open log file %s: %s", log_file, exc)
            return target

    for handler in handlers:
        target.addHandler(_prepare(handler, level, formatter))
    if log_file:
        target.info("Logging to file: %s", log_file)
    return target


def _prepare(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler
