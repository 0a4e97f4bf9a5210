"""Observability: structured logging with structlog."""

from jenkins_info.observability.logging import (
    SecretRedactor,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
)

__all__ = ["SecretRedactor", "get_logger", "setup_logging", "setup_logging_from_settings"]
