"""structlog configuration for domain_ontology.

Without ``verbose`` only the package's warnings reach stderr:

    ontology_hash_mismatch   domain, local_hash, network_hash
    ontology_stat_failed     metric, error
    ontology_stat_empty      metric
    ontology_stat_unparsable metric, value

``verbose`` adds the load, validation and lifecycle events (info and
debug). Output is console-rendered or JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "domain_ontology"

# rdflib warns once per ill-typed literal; SHACL reports those as violations.
# owlrl is pulled in by pyshacl and logs its inference passes.
THIRD_PARTY_LEVELS: dict[str, int] = {
    "rdflib": logging.ERROR,
    "pyshacl": logging.WARNING,
    "owlrl": logging.WARNING,
}


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: Show the package's DEBUG events. Third-party loggers keep
            their levels from ``THIRD_PARTY_LEVELS`` either way.
        log_json: Render JSON lines instead of console output.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
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

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name, level in THIRD_PARTY_LEVELS.items():
        logging.getLogger(name).setLevel(level)
