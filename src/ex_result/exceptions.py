"""Library exceptions.

All exceptions raised by ex_result inherit from ResultError. The core
combinators never raise; only the unwrap helpers do.
"""
from __future__ import annotations

from typing import Any


class ResultError(Exception):
    """Base exception for result errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class UnwrapError(ResultError):
    def __init__(self, result: Any, message: str) -> None:
        super().__init__(message, {"result": repr(result)})
        self.result = result
