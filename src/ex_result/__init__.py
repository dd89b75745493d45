"""ex_result.

Result/Either value type inspired by Rust, with pure combinators for
explicit success/failure handling instead of exceptions.
"""
from __future__ import annotations

__version__ = "0.1.0"

from ex_result.exceptions import ResultError, UnwrapError
from ex_result.result import (
    Err,
    Ok,
    Result,
    and_then,
    and_then_result,
    error,
    is_error,
    is_ok,
    map,
    map_error,
    map_or,
    map_or_else,
    ok,
    unwrap,
    unwrap_error,
    unwrap_or,
)

__all__ = [
    "__version__",
    "Ok", "Err", "Result",
    "ok", "error",
    "is_ok", "is_error",
    "map", "map_or", "map_or_else", "map_error",
    "and_then", "and_then_result",
    "unwrap", "unwrap_or", "unwrap_error",
    "ResultError", "UnwrapError",
]
