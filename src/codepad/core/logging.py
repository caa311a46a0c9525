"""structlog configuration and per-request log context."""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg")


def setup_logging(debug: bool = False) -> None:
    """Route stdlib and structlog output to stdout.

    Debug mode renders coloured console lines; otherwise every line is a JSON
    object carrying any bound ``request_id`` and ``project_id``.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # Access lines duplicate request_handled unless debugging
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if debug else logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Attach the correlation id to every log line until the context is cleared."""
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_project_context(project_id: object) -> None:
    """Attach the project being operated on to subsequent log lines."""
    bind_contextvars(project_id=str(project_id))


def clear_request_context() -> None:
    clear_contextvars()
