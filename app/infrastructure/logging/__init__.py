"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the site using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all request context

Processors:
    - add_app_info(): Processor to add app name/version
    - add_environment_info(): Processor to add environment name

Example:
    from infrastructure.logging import get_module_logger, bind_request_context

    logger = get_module_logger()
    logger.info("module_initialized")

    with bind_request_context(correlation_id="req-123"):
        logger.info("processing_request")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
    clear_request_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
    "add_app_info",
    "add_environment_info",
]
