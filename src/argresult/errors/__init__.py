"""Error handling for argresult.

- ErrorCode: codes for combinator contract failures
- DispatchError: structured, immutable error description
- ArgResultException and subclasses: raised on contract violations
"""

from .errors import (
    ArgResultException,
    DispatchError,
    ErrorCode,
    NotParsedError,
    UnmatchedVerbError,
    qualname,
)

__all__ = [
    "ArgResultException",
    "DispatchError",
    "ErrorCode",
    "NotParsedError",
    "UnmatchedVerbError",
    "qualname",
]
