"""structlog rendering for the ``calbound`` logger.

calbound logs through stdlib ``logging`` and passes its structured fields
(``op``, ``code``, ``zone`` ...) as ``extra``. :func:`configure_logging`
installs a single stderr handler on the ``calbound`` logger that renders
those records with structlog, as console lines or JSON. The root logger and
the host application's handlers are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

from calbound.config.settings import CalboundSettings

PACKAGE_LOGGER = "calbound"
HANDLER_NAME = "calbound.structlog"


def build_formatter(*, log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    """ProcessorFormatter turning stdlib records plus their extras into events."""
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> logging.Logger:
    """Route ``calbound`` records to stderr; DEBUG when *verbose*, else WARNING.

    Calling again replaces the handler installed by a previous call.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in pkg.handlers if h.get_name() == HANDLER_NAME]:
        pkg.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(build_formatter(log_json=log_json))
    pkg.addHandler(handler)
    pkg.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return pkg


def configure_from_settings(settings: CalboundSettings) -> logging.Logger:
    """Apply the ``[logging]`` section of *settings*."""
    return configure_logging(
        verbose=settings.logging.verbose,
        log_json=settings.logging.json_output,
    )
