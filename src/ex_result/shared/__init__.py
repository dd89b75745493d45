"""Shared module.

Cross-cutting concerns: configuration and logging.
"""
from ex_result.shared.config import Settings, get_settings
from ex_result.shared.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
