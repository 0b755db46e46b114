"""structlog setup for the ``notelinks`` command.

Stdout carries the link listing and is often piped into other tools, so
every log record goes to stderr.  Human output is a short console line
per event; ``--log-json`` switches to one JSON object per line with a
timestamp for log collectors.

Level of the ``notelinks`` logger:

========================  ========
flags                     level
========================  ========
``-v/--verbose``          DEBUG
(default)                 WARNING
``-q/--quiet``            ERROR
========================  ========

Verbose wins when both flags are given.  Third-party loggers stay at
WARNING whatever the flags.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "notelinks"


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a level for the ``notelinks`` logger."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Safe to call more than once; the root handler is replaced, not stacked.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        shared_processors.insert(3, structlog.processors.TimeStamper(fmt="iso", utc=True))
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        # One invocation lasts milliseconds; timestamps only add noise here.
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(resolve_level(verbose=verbose, quiet=quiet))
