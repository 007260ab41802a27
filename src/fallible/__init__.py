"""fallible - A Rust-like Result type for fallible computations"""

__version__ = "0.1.0"
__author__ = "Ali Sadeghi Aghili"
__email__ = "alisadeghiaghili@gmail.com"

from .exceptions import (
    ErrorType,
    ExpectedErrError,
    FallibleError,
    NotAResultError,
)
from .result import (
    Err,
    Ok,
    Result,
    async_result_from,
    bind_result,
    bind_result_fn,
    err,
    is_err,
    is_ok,
    map_err,
    map_err_fn,
    map_ok,
    map_ok_fn,
    ok,
    pipe,
    result_from,
    unwrap_err,
    unwrap_err_or,
    unwrap_err_or_else,
    unwrap_err_or_else_fn,
    unwrap_err_or_fn,
    unwrap_ok,
    unwrap_ok_or,
    unwrap_ok_or_else,
    unwrap_ok_or_else_fn,
    unwrap_ok_or_fn,
)

__all__ = [
    # Result type
    "Result",
    "Ok",
    "Err",
    # Construction
    "ok",
    "err",
    "result_from",
    "async_result_from",
    # Inspection
    "is_ok",
    "is_err",
    # Unwrapping
    "unwrap_ok",
    "unwrap_err",
    "unwrap_ok_or",
    "unwrap_ok_or_fn",
    "unwrap_ok_or_else",
    "unwrap_ok_or_else_fn",
    "unwrap_err_or",
    "unwrap_err_or_fn",
    "unwrap_err_or_else",
    "unwrap_err_or_else_fn",
    # Transformation
    "map_ok",
    "map_ok_fn",
    "map_err",
    "map_err_fn",
    "bind_result",
    "bind_result_fn",
    "pipe",
    # Exceptions
    "FallibleError",
    "ErrorType",
    "ExpectedErrError",
    "NotAResultError",
]
