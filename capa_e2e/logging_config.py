"""structlog setup shared by the CLI and anything embedding the fixtures."""

import logging

import structlog


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure stdlib logging and structlog.

    Args:
        log_level: Name of the logging level (e.g. "DEBUG")
        json_logs: Render JSON lines instead of human-friendly console output
    """
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
