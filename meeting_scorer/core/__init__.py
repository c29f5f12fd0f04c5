"""
Core Package

Centralized configuration, logging and error handling for the scoring engine.

Modules:
- config: Environment configuration and settings
- logging: Structured logging with trace_id support
- errors: Standardized error classes

Usage:
    from meeting_scorer.core import settings, setup_logging, set_trace_id
    from meeting_scorer.core import ValidationError
"""

# Configuration
from meeting_scorer.core.config import settings, get_settings

# Logging
from meeting_scorer.core.logging import (
    setup_logging,
    set_trace_id,
    get_trace_id,
    get_logger
)

# Errors
from meeting_scorer.core.errors import (
    AppError,
    ValidationError,
    error_payload
)

__all__ = [
    # Config
    "settings",
    "get_settings",

    # Logging
    "setup_logging",
    "set_trace_id",
    "get_trace_id",
    "get_logger",

    # Errors
    "AppError",
    "ValidationError",
    "error_payload",
]
