import logging

import structlog


def configure_logging(humanize=False, level=logging.INFO):
    """Configure structlog for the process.

    Args:
        humanize: Render colored console lines instead of JSON
        level: Minimum level that gets emitted
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if humanize:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


def get_logger(name):
    return structlog.get_logger(logger_name=name)
