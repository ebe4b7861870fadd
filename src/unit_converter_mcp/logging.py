"""Structured logging for the Unit Converter MCP Server.

Provides JSON logging with correlation IDs for tracing tool calls.
Log output goes to stderr; stdout belongs to the stdio transport.
"""

import structlog
import sys
import uuid
import logging
from contextvars import ContextVar
from typing import Optional, Any, Dict
from .config import get_config, ServerConfig


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def _short_id() -> str:
    return str(uuid.uuid4())[:8]


def get_correlation_id() -> str:
    """Get current correlation ID or generate a new one."""
    cid = correlation_id_var.get()
    if cid is None:
        cid = _short_id()
        correlation_id_var.set(cid)
    return cid


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    correlation_id_var.set(correlation_id)


def new_correlation_id() -> str:
    """Generate and set a new correlation ID."""
    cid = _short_id()
    correlation_id_var.set(cid)
    return cid


def clear_correlation_id() -> None:
    """Clear the correlation ID."""
    correlation_id_var.set(None)


def add_correlation_id(
    logger: Any,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Structlog processor to add correlation ID."""
    event_dict["correlation_id"] = get_correlation_id()
    return event_dict


def setup_logging(
    config: Optional[ServerConfig] = None,
    log_level: Optional[str] = None,
) -> None:
    """Configure structured logging.

    Args:
        config: Server configuration (uses global config if not provided)
        log_level: Level name overriding the configured one
    """
    config = config or get_config()
    level_name = (log_level or config.log_level).upper()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_correlation_id,
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a logger instance."""
    return structlog.get_logger(name)


class LogContext:
    """Context manager for scoped logging with correlation ID.

    Without an explicit ID each block gets a fresh one, so every tool call
    is traceable on its own. Extra keyword fields are bound to every log
    line emitted inside the block.
    """

    def __init__(self, correlation_id: Optional[str] = None, **extra: Any):
        self.correlation_id = correlation_id
        self.extra = extra
        self._previous_id: Optional[str] = None
        self._tokens: Any = None

    def __enter__(self) -> "LogContext":
        self._previous_id = correlation_id_var.get()
        if self.correlation_id:
            set_correlation_id(self.correlation_id)
        else:
            self.correlation_id = new_correlation_id()
        self._tokens = structlog.contextvars.bind_contextvars(**self.extra)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        structlog.contextvars.reset_contextvars(**self._tokens)
        if self._previous_id is None:
            clear_correlation_id()
        else:
            set_correlation_id(self._previous_id)
