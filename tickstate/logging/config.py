"""
Centralized logging configuration for tickstate.

This module provides standardized logging configuration using structlog
for all components. State machines log registry changes and transitions
through the helpers below so that every event carries the same keys.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..errors import ConfigurationError


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",  # structlog will handle formatting
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_config(config: dict[str, Any]) -> None:
    """
    Configure logging from the ``logging`` section of a merged config.

    Args:
        config: Merged configuration dictionary (see ConfigLoader.merge_config)
    """
    section = config.get("logging", {})
    if not isinstance(section, dict):
        raise ConfigurationError("Section 'logging' must be a mapping")
    configure_logging(
        level=section.get("level", "INFO"),
        format_json=section.get("format_json", False),
        include_timestamp=section.get("include_timestamp", True),
        include_caller=section.get("include_caller", False),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger specifically configured for state machine events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for state transitions and registry changes
    """
    # Initial values keep the proxy lazy; bind() here would freeze the
    # structlog configuration in effect at import time.
    return structlog.get_logger(
        name,
        subsystem="state_machine",
        audit_trail=True
    )


def log_state_transition(
    logger: FilteringBoundLogger,
    machine: str,
    from_state: Optional[str],
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a state transition with standardized format.

    Args:
        logger: Structlog logger instance
        machine: Identity of the transitioning machine
        from_state: Previously active state, None on start
        to_state: Newly active state
        trigger: What triggered the transition ("start" or "go_to_state")
        context: Additional context data
    """
    bound_logger = logger.bind(
        machine=machine,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
        event_type="state_transition"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")


def log_registry_event(
    logger: FilteringBoundLogger,
    machine: str,
    action: str,
    state_name: str,
    accepted: bool,
    reason: Optional[str] = None
) -> None:
    """
    Log a registry change (state added or removed) with standardized format.

    Rejected changes are logged as warnings.
    """
    bound_logger = logger.bind(
        machine=machine,
        action=action,
        state_name=state_name,
        result="ACCEPTED" if accepted else "REJECTED",
        event_type="registry_event"
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)

    if accepted:
        bound_logger.debug("Registry updated")
    else:
        bound_logger.warning("Registry change rejected")
