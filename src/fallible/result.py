"""Result type for explicit error handling.

Provides a Result[T, E] type similar to Rust's Result enum, plus free
functions for building, inspecting, unwrapping and transforming results.
Every transforming function has a curried ``*_fn`` twin that takes only the
callback and returns a function of the result, for use with :func:`pipe`.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    NoReturn,
    Optional,
    TypeGuard,
    TypeVar,
    Union,
)

from .exceptions import ExpectedErrError, NotAResultError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful result."""

    value: T = None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ExpectedErrError(self.value)

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[Any], Any]) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], Any]) -> "Ok[T]":
        return self

    def and_then(self, func: Callable[[T], "Result[U, F]"]) -> "Result[U, F]":
        return func(self.value)


class Err(Exception, Generic[E]):
    """Represents an error result.

    Err is an exception as well as a value: ``unwrap_ok`` raises the Err
    itself, so a failure can be propagated up the stack and caught with
    ``except Err``. The reason is fixed at construction.
    """

    __match_args__ = ("reason",)

    def __init__(self, reason: E = None):
        super().__init__(reason)
        super().__setattr__("_reason", reason)

    @property
    def reason(self) -> E:
        return self._reason

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("reason", "_reason"):
            raise AttributeError("Err reason is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in ("reason", "_reason"):
            raise AttributeError("Err reason is immutable")
        super().__delattr__(name)

    def __reduce__(self):
        return (type(self), (self._reason,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Err):
            return NotImplemented
        return self._reason == other._reason

    def __hash__(self) -> int:
        return hash((Err, self._reason))

    def __repr__(self) -> str:
        return f"Err(reason={self._reason!r})"

    def __str__(self) -> str:
        reason = self._reason
        if reason is None:
            return "Err"
        kind = type(reason)
        # Reasons without their own text render as the bare variant name
        if kind.__str__ is object.__str__ and kind.__repr__ is object.__repr__:
            return "Err"
        return str(reason)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.with_traceback(None)

    def unwrap_err(self) -> E:
        return self._reason

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self._reason)

    def map(self, func: Callable[[Any], Any]) -> "Err[E]":
        return self

    def map_err(self, func: Callable[[E], F]) -> "Err[F]":
        return Err(func(self._reason))

    def and_then(self, func: Callable[[Any], Any]) -> "Err[E]":
        return self


Result = Union[Ok[T], Err[E]]


def _check(result: Any) -> "Result[Any, Any]":
    if not isinstance(result, (Ok, Err)):
        raise NotAResultError(result)
    return result


def _discard(error: Exception) -> None:
    return None


# Construction


def ok(value: T = None) -> Ok[T]:
    """Wrap ``value`` in an Ok (None when omitted)."""
    return Ok(value)


def err(reason: E = None) -> Err[E]:
    """Wrap ``reason`` in an Err (None when omitted)."""
    return Err(reason)


def result_from(
    fn: Callable[[], T],
    catch_fn: Optional[Callable[[Exception], E]] = None,
) -> "Result[T, Optional[E]]":
    """Call ``fn`` and capture its outcome as a Result.

    Args:
        fn: Zero-argument callable to invoke.
        catch_fn: Maps a raised exception to the Err reason. Without one the
            exception is discarded and the reason is None.

    Returns:
        Ok with the return value, or Err with the mapped exception.
    """
    try:
        value = fn()
    except Exception as e:
        logger.debug("result_from captured %s: %s", type(e).__name__, e)
        return Err((catch_fn or _discard)(e))
    return Ok(value)


async def async_result_from(
    fn: Callable[[], Union[T, Awaitable[T]]],
    catch_fn: Optional[Callable[[Exception], Union[E, Awaitable[E]]]] = None,
) -> "Result[T, Optional[E]]":
    """Async variant of :func:`result_from`.

    Both ``fn`` and ``catch_fn`` may return awaitables, which are awaited
    before wrapping. An exception raised while awaiting counts as a failure
    of ``fn``. Cancellation is not captured.
    """
    try:
        value = fn()
        if inspect.isawaitable(value):
            value = await value
    except Exception as e:
        logger.debug("async_result_from captured %s: %s", type(e).__name__, e)
        reason = (catch_fn or _discard)(e)
        if inspect.isawaitable(reason):
            reason = await reason
        return Err(reason)
    return Ok(value)


# Inspection


def is_ok(result: "Result[T, E]") -> TypeGuard[Ok[T]]:
    """Return True if ``result`` is an Ok."""
    return isinstance(result, Ok)


def is_err(result: "Result[T, E]") -> TypeGuard[Err[E]]:
    """Return True if ``result`` is an Err."""
    return isinstance(result, Err)


# Unwrapping


def unwrap_ok(result: "Result[T, E]") -> T:
    """Return the Ok value, or raise the Err itself."""
    return _check(result).unwrap()


def unwrap_err(result: "Result[T, E]") -> E:
    """Return the Err reason, or raise ExpectedErrError for an Ok."""
    return _check(result).unwrap_err()


def unwrap_ok_or(result: "Result[T, E]", default: U) -> Union[T, U]:
    return _check(result).unwrap_or(default)


def unwrap_ok_or_fn(default: U) -> Callable[["Result[T, E]"], Union[T, U]]:
    return lambda result: unwrap_ok_or(result, default)


def unwrap_ok_or_else(
    result: "Result[T, E]", else_fn: Callable[[E], U]
) -> Union[T, U]:
    """Return the Ok value, or ``else_fn(reason)`` for an Err."""
    return _check(result).unwrap_or_else(else_fn)


def unwrap_ok_or_else_fn(
    else_fn: Callable[[E], U],
) -> Callable[["Result[T, E]"], Union[T, U]]:
    return lambda result: unwrap_ok_or_else(result, else_fn)


def unwrap_err_or(result: "Result[T, E]", default: F) -> Union[E, F]:
    if isinstance(_check(result), Err):
        return result.reason
    return default


def unwrap_err_or_fn(default: F) -> Callable[["Result[T, E]"], Union[E, F]]:
    return lambda result: unwrap_err_or(result, default)


def unwrap_err_or_else(
    result: "Result[T, E]", else_fn: Callable[[T], F]
) -> Union[E, F]:
    """Return the Err reason, or ``else_fn(value)`` for an Ok."""
    if isinstance(_check(result), Err):
        return result.reason
    return else_fn(result.value)


def unwrap_err_or_else_fn(
    else_fn: Callable[[T], F],
) -> Callable[["Result[T, E]"], Union[E, F]]:
    return lambda result: unwrap_err_or_else(result, else_fn)


# Transformation


def map_ok(result: "Result[T, E]", fn: Callable[[T], U]) -> "Result[U, E]":
    """Apply ``fn`` to an Ok value. An Err is returned as is."""
    return _check(result).map(fn)


def map_ok_fn(fn: Callable[[T], U]) -> Callable[["Result[T, E]"], "Result[U, E]"]:
    return lambda result: map_ok(result, fn)


def map_err(result: "Result[T, E]", fn: Callable[[E], F]) -> "Result[T, F]":
    """Apply ``fn`` to an Err reason. An Ok is returned as is."""
    return _check(result).map_err(fn)


def map_err_fn(fn: Callable[[E], F]) -> Callable[["Result[T, E]"], "Result[T, F]"]:
    return lambda result: map_err(result, fn)


def bind_result(
    result: "Result[T, E]", fn: Callable[[T], "Result[U, F]"]
) -> "Result[U, Union[E, F]]":
    """Chain a fallible step onto an Ok value.

    For an Ok, returns ``fn(value)``. For an Err, returns the same Err
    without calling ``fn``.
    """
    return _check(result).and_then(fn)


def bind_result_fn(
    fn: Callable[[T], "Result[U, F]"],
) -> Callable[["Result[T, E]"], "Result[U, Union[E, F]]"]:
    return lambda result: bind_result(result, fn)


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Feed ``value`` through ``fns`` from left to right.

    Example:
        >>> pipe(ok(2), map_ok_fn(lambda x: x * 10), unwrap_ok_or_fn(0))
        20
    """
    for fn in fns:
        value = fn(value)
    return value
