import logging

import structlog


def configure_logging(level="INFO", fmt="json"):
    """Route structlog through stdlib logging with one JSON object per event.

    ``fmt="console"`` switches to the human readable renderer for local runs.
    """
    logging.basicConfig(level=level, format="%(message)s")
    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
