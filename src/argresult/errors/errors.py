"""Error codes and exceptions for parse-result dispatch.

Parse errors carried by a failed result are opaque to this package and are
never wrapped here. These types cover misuse of the combinators themselves:
a verb fold that meets a payload type nobody handles, or reading the value of
a result that did not parse.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict


class ErrorCode(StrEnum):
    """Codes for combinator contract failures."""
    UNMATCHED_VERB = "UNMATCHED_VERB"
    NOT_PARSED = "NOT_PARSED"
    INVALID_HANDLER = "INVALID_HANDLER"


def qualname(tp: type) -> str:
    """Dotted module path + qualified name of a type."""
    module = getattr(tp, "__module__", "")
    name = getattr(tp, "__qualname__", repr(tp))
    return name if module in ("", "builtins") else f"{module}.{name}"


class DispatchError(BaseModel):
    """Structured description of a combinator contract failure."""

    model_config = ConfigDict(frozen=True)

    message: str
    code: ErrorCode
    value_type: str | None = None
    expected: tuple[str, ...] = ()

    @classmethod
    def unmatched(cls, value: object, expected: tuple[type, ...]) -> Self:
        """Factory for a parsed value whose type no handler covers."""
        value_type = qualname(type(value))
        names = tuple(qualname(t) for t in expected)
        return cls(
            message=f"no handler for verb type {value_type}",
            code=ErrorCode.UNMATCHED_VERB,
            value_type=value_type,
            expected=names,
        )

    def render(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.expected:
            parts.append(f" (handled: {', '.join(self.expected)})")
        return "".join(parts)

    __str__ = render


class ArgResultException(Exception):
    """Exception wrapping a DispatchError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: DispatchError) -> None:
        self.error = error
        super().__init__(error.render())

    @classmethod
    def create(cls, message: str, code: ErrorCode) -> Self:
        return cls(DispatchError(message=message, code=code))


class UnmatchedVerbError(ArgResultException):
    """A parsed verb payload matched none of the supplied handler types.

    Signals a mismatch between the parser's configured verbs and the handlers
    passed to a verb fold. Not a parse error and not meant to be recovered.
    """

    @classmethod
    def for_value(cls, value: object, expected: tuple[type, ...]) -> Self:
        return cls(DispatchError.unmatched(value, expected))


class NotParsedError(ArgResultException):
    """Value requested from a result that holds errors."""
