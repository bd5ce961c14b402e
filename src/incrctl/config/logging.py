"""structlog setup for the incrctl CLI.

Everything logs through stdlib ``logging.getLogger(__name__)``; structlog
only formats the records on stderr so stdout stays reserved for results.

Most of what incrctl logs is registry bookkeeping at DEBUG and plugin
faults at WARNING. Plugin faults carry ``exc_info``: the console
renderer prints the traceback, and in JSON mode it is flattened into an
``exception`` string so each record stays a single line.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Loggers that stay at WARNING even with --verbose.
_QUIET_LOGGERS = ("pluggy",)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``incrctl`` loggers to stderr through structlog.

    Safe to call repeatedly: the root handler is replaced, never stacked.

    Args:
        verbose: Enable DEBUG-level output for ``incrctl.*``. When False,
            only WARNING+ (plugin faults) is shown.
        log_json: One JSON object per line instead of console output.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    output_processors: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        output_processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        output_processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

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
            processors=output_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("incrctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
