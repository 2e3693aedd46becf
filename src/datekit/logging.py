"""Logging configuration for the datekit library."""

import logging

import structlog

NAMESPACE = "datekit"


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger tagged with its module name.

    Every event carries ``logger`` (the module, ``datekit`` by default) so
    output can be attributed and filtered per module.
    """
    name = name or NAMESPACE
    return structlog.get_logger(name, logger=name)


def _keep_datekit_events(logger, method_name: str, event_dict: dict) -> dict:
    name = str(event_dict.get("logger", ""))
    if name != NAMESPACE and not name.startswith(NAMESPACE + "."):
        raise structlog.DropEvent
    return event_dict


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    datekit_only: bool = False,
) -> None:
    """Configure datekit logging.

    Library events are debug level except ``calendar_configured`` (info) and
    ``date_arithmetic_failed`` (error).

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output (production), False for console
        datekit_only: Drop events from loggers outside the datekit namespace
    """
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))

    shared_processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if datekit_only:
        shared_processors.insert(0, _keep_datekit_events)

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
