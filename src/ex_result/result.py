"""Result pattern for explicit error handling.

Provides Ok and Err types to replace exception-based control flow, plus
pure combinators that construct, inspect and transform them.

Example:
    >>> map_or(ok("foo"), 42, len)
    3
    >>> map_error(error(13), lambda code: f"error code: {code}")
    Err(error='error code: 13')
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar

from ex_result.exceptions import UnwrapError
from ex_result.shared.logging import get_logger

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def is_ok(self) -> bool:
        """Check if result is ok."""
        return True

    def is_error(self) -> bool:
        """Check if result is error."""
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        """Apply fn to the value and wrap the outcome in a new Ok."""
        return Ok(fn(self.value))

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        """Apply fn to the value; the default is ignored."""
        return fn(self.value)

    def map_or_else(self, default_fn: Callable[[Any], U], fn: Callable[[T], U]) -> U:
        """Apply fn to the value; the fallback is never called."""
        return fn(self.value)

    def map_error(self, fn: Callable[[Any], Any]) -> Ok[T]:
        """Return self untouched."""
        return self

    def and_then(self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Feed the value into fn, which produces the next result."""
        return fn(self.value)

    def and_then_result(self, other: Result[U, F]) -> Result[U, F]:
        """Return the other result."""
        return other

    def unwrap(self) -> T:
        """Get the value."""
        return self.value

    def unwrap_or(self, default: Any) -> T:
        """Get the value, ignoring default."""
        return self.value

    def unwrap_error(self) -> NoReturn:
        """Raise, since an Ok holds no error."""
        _fail_unwrap(self, "Cannot unwrap error of Ok")


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result."""

    error: E

    def is_ok(self) -> bool:
        """Check if result is ok."""
        return False

    def is_error(self) -> bool:
        """Check if result is error."""
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        """Return self untouched."""
        return self

    def map_or(self, default: U, fn: Callable[[Any], U]) -> U:
        """Return the default; the error is discarded."""
        return default

    def map_or_else(self, default_fn: Callable[[E], U], fn: Callable[[Any], U]) -> U:
        """Apply the fallback to the error payload."""
        return default_fn(self.error)

    def map_error(self, fn: Callable[[E], F]) -> Err[F]:
        """Apply fn to the error and wrap the outcome in a new Err."""
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        """Return self without calling fn."""
        return self

    def and_then_result(self, other: Result[Any, Any]) -> Err[E]:
        """Return self, ignoring the other result."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise error when unwrapping failure."""
        _fail_unwrap(self, "Cannot unwrap Err")

    def unwrap_or(self, default: U) -> U:
        """Get default value for failure."""
        return default

    def unwrap_error(self) -> E:
        """Get the error."""
        return self.error


# Type alias
Result = Ok[T] | Err[E]


def _fail_unwrap(result: Ok[Any] | Err[Any], message: str) -> NoReturn:
    logger.debug(
        "Result unwrap failed",
        variant=type(result).__name__,
        payload=repr(result.value if isinstance(result, Ok) else result.error),
    )
    raise UnwrapError(result, message)


def ok(value: T) -> Ok[T]:
    """Create an Ok result.

    Args:
        value: The success value

    Returns:
        Ok wrapping the value
    """
    return Ok(value)


def error(value: E) -> Err[E]:
    """Create an Err result.

    Args:
        value: The error value

    Returns:
        Err wrapping the error
    """
    return Err(value)


def is_ok(result: Result[T, E]) -> bool:
    """Return True if the result is ok.

    >>> is_ok(ok(-3))
    True
    >>> is_ok(error("Some error message"))
    False
    """
    return isinstance(result, Ok)


def is_error(result: Result[T, E]) -> bool:
    """Return True if the result is error.

    >>> is_error(ok(-3))
    False
    >>> is_error(error("Some error message"))
    True
    """
    return isinstance(result, Err)


def map(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Map a result by applying fn to an ok value, leaving an error untouched.

    >>> map(ok(1), lambda x: x * 2)
    Ok(value=2)
    """
    return result.map(fn)


def map_or(result: Result[T, E], default: U, fn: Callable[[T], U]) -> U:
    """Apply fn to the ok value, or return default for an error.

    The error payload is discarded.

    >>> map_or(ok("foo"), 42, len)
    3
    >>> map_or(error("bar"), 42, len)
    42
    """
    return result.map_or(default, fn)


def map_or_else(
    result: Result[T, E],
    default_fn: Callable[[E], U],
    fn: Callable[[T], U],
) -> U:
    """Apply fn to the ok value, or default_fn to the error value.

    >>> map_or_else(ok("foo"), lambda _: 21 * 2, len)
    3
    >>> map_or_else(error("bar"), lambda _: 21 * 2, len)
    42
    """
    return result.map_or_else(default_fn, fn)


def map_error(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Map a result by applying fn to an error value, leaving an ok untouched.

    >>> map_error(ok(2), lambda x: f"error code: {x}")
    Ok(value=2)
    >>> map_error(error(13), lambda x: f"error code: {x}")
    Err(error='error code: 13')
    """
    return result.map_error(fn)


def and_then_result(first: Result[T, E], second: Result[U, E]) -> Result[U, E]:
    """Return second if first is ok, otherwise return first.

    Both results are already evaluated; use and_then to defer the second.

    >>> and_then_result(ok(2), error("late error"))
    Err(error='late error')
    >>> and_then_result(error("early error"), ok("foo"))
    Err(error='early error')
    >>> and_then_result(error("not a 2"), error("late error"))
    Err(error='not a 2')
    >>> and_then_result(ok(2), ok("different result type"))
    Ok(value='different result type')
    """
    return first.and_then_result(second)


def and_then(result: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a computation producing a result; fn runs only for an ok value.

    >>> and_then(ok(4), lambda x: ok(x + 1))
    Ok(value=5)
    >>> and_then(error("early"), lambda x: ok(x + 1))
    Err(error='early')
    """
    return result.and_then(fn)


def unwrap(result: Result[T, E]) -> T:
    """Get the ok value, raising UnwrapError for an error."""
    return result.unwrap()


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Get the ok value or default."""
    return result.unwrap_or(default)


def unwrap_error(result: Result[T, E]) -> E:
    """Get the error value, raising UnwrapError for an ok."""
    return result.unwrap_error()
