"""Verb handlers for multi-command folds.

A verb fold pairs each verb (subcommand options) type with the function that
handles it. Matching is by exact runtime type: the payload's class is its own
discriminant, so there is no separate tag to keep in sync.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from argresult.errors import ErrorCode

V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class VerbHandler(Generic[V, R]):
    """Function ``fn`` applied to parsed values whose type is exactly ``verb_type``."""

    verb_type: type[V]
    fn: Callable[[V], R]

    def matches(self, value: object) -> bool:
        return type(value) is self.verb_type

    def __call__(self, value: V) -> R:
        return self.fn(value)


def verb(verb_type: type[V], fn: Callable[[V], R]) -> VerbHandler[V, R]:
    """Create a VerbHandler concisely."""
    return VerbHandler(verb_type, fn)


def as_handler(handler: VerbHandler[V, R] | tuple[type[V], Callable[[V], R]]) -> VerbHandler[V, R]:
    """Coerce a ``(verb_type, fn)`` pair into a VerbHandler."""
    if isinstance(handler, VerbHandler):
        return handler
    if (
        isinstance(handler, tuple)
        and len(handler) == 2
        and isinstance(handler[0], type)
        and callable(handler[1])
    ):
        return VerbHandler(handler[0], handler[1])
    raise TypeError(
        f"[{ErrorCode.INVALID_HANDLER}] expected VerbHandler or (type, callable), got {handler!r}"
    )


__all__ = ["VerbHandler", "as_handler", "verb"]
