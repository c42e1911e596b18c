"""structlog rendering for fieldcheck's validation events.

The engine logs through the stdlib ``fieldcheck`` logger and passes event
data as ``extra`` keys (``record``, ``field``, ``code``, ``errors``).
:func:`configure_logging` attaches one handler to that logger whose
structlog formatter lifts those keys into the rendered event:

- Human (default): console key/value lines
- JSON (``log_json``): one JSON object per event

Nothing is configured on import, and the root logger is never touched.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from fieldcheck.config.settings import FieldCheckSettings

PACKAGE_LOGGER = "fieldcheck"

# Keys the validator attaches to its log records.
EVENT_KEYS: tuple[str, ...] = ("record", "field", "code", "errors")

_HANDLER_MARKER = "_fieldcheck_handler"


def build_formatter(*, log_json: bool, colors: bool = False) -> structlog.stdlib.ProcessorFormatter:
    """Formatter turning fieldcheck's stdlib records into structlog events."""
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(allow=EVENT_KEYS),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    settings: FieldCheckSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route the ``fieldcheck`` logger to *stream* (default: stderr).

    DEBUG when ``settings.verbose``, else WARNING.  A handler installed by a
    previous call is replaced, so repeated calls never stack output.

    Returns:
        The installed handler.
    """
    if settings is None:
        settings = FieldCheckSettings()
    target = stream if stream is not None else sys.stderr

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in pkg_logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        pkg_logger.removeHandler(old)

    handler = logging.StreamHandler(target)
    handler.setFormatter(build_formatter(log_json=settings.log_json, colors=target.isatty()))
    setattr(handler, _HANDLER_MARKER, True)

    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
    pkg_logger.propagate = False
    return handler
