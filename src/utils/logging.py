"""filesize logging config

## Setup

Logging is automatically configured when this module is imported. It uses structlog for structured logging. Logs are
pretty-printed in local env (FILESIZE_ENVIRONMENT='local') and are JSON-formatted in other envs.

Example usage:

```
from src.utils.logging import get_logger

logger = get_logger(__name__)
logger.info("Converted size", quantity=3, from_unit="GB", to_unit="MB")
```

## Log context

Use add_log_context() to add context that will be included in all subsequent log messages within the current
context:

```
from src.utils.logging import add_log_context, get_logger

add_log_context(command="readable")

logger = get_logger(__name__)
logger.info("Formatting size")  # Includes command
```

Use clear_log_context() to reset all context.

### Standard logging integration

We configure Python's standard `logging` module to route through structlog. This means that library code using
`logging.getLogger()` will automatically include context and be formatted correctly for the env.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
import structlog.contextvars

from src.utils.config import get_filesize_environment, get_log_level, get_log_renderer_override


def _is_local_environment() -> bool:
    """Check if we're running in a local development environment."""
    return get_filesize_environment() == "local"


def _get_log_renderer() -> structlog.types.Processor:
    """Get the appropriate console renderer based on environment.

    Can be overridden with LOG_RENDERER environment variable:
    - 'console': Force ConsoleRenderer (human-readable with colors)
    - 'json': Force JSONRenderer (structured JSON output)

    Returns:
        ConsoleRenderer for local dev, JSONRenderer otherwise
    """
    # Check for explicit override
    log_renderer = get_log_renderer_override()
    if log_renderer == "console":
        use_console = True
    elif log_renderer == "json":
        use_console = False
    else:
        # Fall back to environment-based detection
        use_console = _is_local_environment()

    if use_console:
        return structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event=0,  # No padding to prevent wrapping
            force_colors=False,
            repr_native_str=False,
            exception_formatter=structlog.dev.plain_traceback,
            sort_keys=True,  # Sort context keys for consistency
            event_key="message",
        )
    else:
        # Use JSON format for log aggregation
        return structlog.processors.JSONRenderer()


def configure_logging() -> None:
    """Configure structlog with environment-appropriate settings using built-in contextvars.

    Local development: Human-readable console output with colors
    Other environments: JSON lines for log aggregation
    """
    # Common processors for all environments
    common_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,  # Use structlog's built-in contextvars support
        structlog.processors.EventRenamer("message"),  # Rename 'event' to 'message'
        structlog.stdlib.filter_by_level,  # Must come after add_log_level
    ]

    # Configure structlog to work with ProcessorFormatter
    # The wrap_for_formatter processor formats messages for standard library compatibility
    structlog.configure(
        processors=common_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Set up a handler that uses structlog formatting for ALL loggers
    # For foreign_pre_chain, we need to exclude filter_by_level since standard library
    # loggers handle their own filtering and the processor expects a structlog logger
    foreign_processors = [p for p in common_processors if p != structlog.stdlib.filter_by_level]
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_get_log_renderer(),  # This handles final rendering for both structlog and stdlib loggers
            foreign_pre_chain=foreign_processors,
        )
    )

    # Configure the root logger to use our structlog handler
    root_logger = logging.getLogger()
    root_logger.handlers.clear()  # Remove any existing handlers
    root_logger.addHandler(stream_handler)
    # Set log level based on LOG_LEVEL environment variable, default to INFO
    root_logger.setLevel(getattr(logging, get_log_level(), logging.INFO))


# Initialize structlog configuration when module is imported
configure_logging()


def add_log_context(**kwargs: Any) -> None:
    """Add values to the logging context. Simple wrapper for structlog's contextvars.

    Args:
        **kwargs: Key-value pairs to add to the logging context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def remove_log_context(*keys: str) -> None:
    """Remove values from the logging context. Simple wrapper for structlog's contextvars.
    Args:
        *keys: Keys to remove from the logging context
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_log_context() -> None:
    """Clear all values from the logging context."""
    structlog.contextvars.clear_contextvars()


# Type alias for structlog's bound_contextvars return type
LogContext = structlog.contextvars.bound_contextvars


def get_logger(name: str, **kwargs: Any) -> structlog.BoundLogger:
    """Get a logger instance. Wrapper around structlog.get_logger for convenience.

    Args:
        name: Logger name (usually __name__ from the calling module)
    """
    # Get the base logger
    logger = structlog.get_logger(name, **kwargs)
    return logger
