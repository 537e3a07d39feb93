import logging
import sys
from typing import Optional

import structlog


def _static_fields(**fields):
    def processor(logger, method_name, event_dict):
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor


def init_logging(log_level: str = "INFO", app_name: Optional[str] = None) -> structlog.BoundLogger:
    """Route structlog through stdlib logging on stdout.

    JSON lines by default, console rendering at DEBUG. Context bound with
    ``structlog.contextvars`` (the request id) is merged into every event.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if app_name:
        processors.append(_static_fields(app=app_name))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer() if level == logging.DEBUG else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()
