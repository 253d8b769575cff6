"""Parser result: the two-state outcome of parsing a command line.

A ParserResult is either Parsed (holding the materialized options or verb
object) or NotParsed (holding the ordered errors the parser detected). It is
built once by the parser and only read afterwards.

Examples:
    >>> Parsed(42).fold(lambda v: v + 1, len)
    43
    >>> NotParsed(["unknown option --x"]).fold(lambda v: v, len)
    1
    >>> seen = []
    >>> _ = Parsed("ok").with_parsed(seen.append).with_not_parsed(seen.append)
    >>> seen
    ['ok']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from argresult.errors import ErrorCode, NotParsedError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")  # Parsed value type
U = TypeVar("U")  # Mapped value type
R = TypeVar("R")  # Fold result type

Errors = tuple[Any, ...]

logger = logging.getLogger("argresult.result")


class ParserResultType(StrEnum):
    """Discriminant of a ParserResult."""
    PARSED = "parsed"
    NOT_PARSED = "not_parsed"


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Target type of a parse and the verb types it could have produced."""

    current: type
    choices: tuple[type, ...] = ()


class ParserResult(Generic[T]):
    """Discriminated union of a successful parse (Parsed) or its errors (NotParsed).

    Never construct directly; use Parsed() or NotParsed().

    Notes:
        - Read-only after construction; attribute assignment raises
        - Errors are kept as a tuple in detection order
        - Effect methods return ``self`` for chaining
    """

    __slots__ = ("_tag", "_value", "_errors", "_type_info")

    def __init__(
        self,
        tag: ParserResultType,
        value: T | None,
        errors: Errors,
        type_info: TypeInfo,
    ) -> None:
        object.__setattr__(self, "_tag", tag)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_errors", errors)
        object.__setattr__(self, "_type_info", type_info)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─── Inspection ──────────────────────────────────────────────────

    @property
    def tag(self) -> ParserResultType:
        return self._tag

    @property
    def type_info(self) -> TypeInfo:
        return self._type_info

    def is_parsed(self) -> bool:
        return self._tag is ParserResultType.PARSED

    def is_not_parsed(self) -> bool:
        return self._tag is ParserResultType.NOT_PARSED

    @property
    def value(self) -> T:
        """Parsed value. Raises NotParsedError on a failed result."""
        if self._tag is ParserResultType.PARSED:
            return cast(T, self._value)
        raise NotParsedError.create(
            f"value of a result that did not parse ({len(self._errors)} error(s))",
            ErrorCode.NOT_PARSED,
        )

    @property
    def errors(self) -> Errors:
        """Parse errors in detection order; empty for a parsed result."""
        return self._errors

    def ok(self) -> T | None:
        """Parsed value or None."""
        return cast(T, self._value) if self._tag is ParserResultType.PARSED else None

    def unwrap(self) -> T:
        """Extract the parsed value. Raises NotParsedError on failure."""
        return self.value

    def expect(self, msg: str) -> T:
        """Extract the parsed value, failing with a custom message."""
        if self._tag is ParserResultType.PARSED:
            return cast(T, self._value)
        raise NotParsedError.create(f"{msg}: {list(self._errors)!r}", ErrorCode.NOT_PARSED)

    # ─── Effects ─────────────────────────────────────────────────────

    def with_parsed(self, action: Callable[[T], object]) -> ParserResult[T]:
        """Call ``action(value)`` if parsed. Returns self."""
        if self._tag is ParserResultType.PARSED:
            action(cast(T, self._value))
        return self

    def with_parsed_verb(self, verb_type: type[U], action: Callable[[U], object]) -> ParserResult[T]:
        """Call ``action(value)`` if parsed and ``type(value) is verb_type``. Returns self.

        Subclasses of ``verb_type`` do not match; a parsed value of another
        verb type is a silent no-op.
        """
        if self._tag is ParserResultType.PARSED and type(self._value) is verb_type:
            action(cast(U, self._value))
        return self

    def with_not_parsed(self, action: Callable[[Errors], object]) -> ParserResult[T]:
        """Call ``action(errors)`` if not parsed. Returns self."""
        if self._tag is ParserResultType.NOT_PARSED:
            action(self._errors)
        return self

    # ─── Transforms ──────────────────────────────────────────────────

    def fold(self, parsed_fn: Callable[[T], R], not_parsed_fn: Callable[[Errors], R]) -> R:
        """Reduce either variant to a single value. Exactly one function is called."""
        if self._tag is ParserResultType.PARSED:
            return parsed_fn(cast(T, self._value))
        return not_parsed_fn(self._errors)

    def map(self, f: Callable[[T], U]) -> ParserResult[U]:
        """Map ``f`` over a parsed value; a failure passes through unchanged."""
        if self._tag is ParserResultType.PARSED:
            return Parsed(f(cast(T, self._value)), choices=self._type_info.choices)
        return cast("ParserResult[U]", self)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._tag is ParserResultType.PARSED

    def __iter__(self) -> Iterator[T]:
        """Yield the parsed value, or nothing."""
        if self._tag is ParserResultType.PARSED:
            yield cast(T, self._value)

    def __repr__(self) -> str:
        if self._tag is ParserResultType.PARSED:
            return f"Parsed({self._value!r})"
        return f"NotParsed({list(self._errors)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParserResult):
            return NotImplemented
        return (
            self._tag is other._tag
            and self._value == other._value
            and self._errors == other._errors
        )

    def __hash__(self) -> int:
        return hash((self._tag, self._value, self._errors))


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Parsed(value: T, *, choices: Iterable[type] = ()) -> ParserResult[T]:  # noqa: N802
    """Construct a successful result.

    Args:
        value: Materialized options object or verb instance
        choices: Verb types the parser was configured with, if any
    """
    return ParserResult(
        ParserResultType.PARSED,
        value,
        (),
        TypeInfo(type(value), tuple(choices)),
    )


def NotParsed(  # noqa: N802
    errors: Iterable[Any],
    *,
    target: type = object,
    choices: Iterable[type] = (),
) -> ParserResult[Any]:
    """Construct a failed result.

    Args:
        errors: Parse errors in detection order; kept as-is, never inspected.
            A bare str or bytes is rejected rather than split into characters.
        target: Type the parser was trying to build
        choices: Verb types the parser was configured with, if any

    Raises:
        TypeError: ``errors`` is a single str or bytes
    """
    if isinstance(errors, (str, bytes)):
        raise TypeError(f"errors must be an iterable of errors, not {type(errors).__name__}")
    errs = tuple(errors)
    if not errs:
        logger.warning("NotParsed built with no errors (target=%s)", target.__qualname__)
    return ParserResult(ParserResultType.NOT_PARSED, None, errs, TypeInfo(target, tuple(choices)))
