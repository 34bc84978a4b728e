"""Log routing for gsctl.

Validators, the resolver and the batch processor log through plain
``logging.getLogger(__name__)`` calls under the ``goldsphere_contracts``
namespace. :func:`configure_logging` is called once per CLI invocation
and sends those records through structlog's ``ProcessorFormatter`` to
stderr, as console lines or as JSON (``--log-json``). Stdout stays
reserved for envelopes.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "goldsphere_contracts"


def _shared_processors() -> list[structlog.types.Processor]:
    # Applied to structlog events and to foreign stdlib records alike.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Point package and structlog logging at stderr.

    Repeated calls swap the root handler instead of adding another one.
    Third-party loggers stay at WARNING whatever *verbose* says.

    Args:
        verbose: Let ``goldsphere_contracts`` DEBUG records through.
        log_json: One JSON object per line instead of console lines.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
