"""Combinators for consuming a ParserResult without branching on its variant.

Effects (with_parsed, with_parsed_verb, with_not_parsed) run a caller action
when the matching variant is present and return the same result, so several
can be chained against one outcome. Folds (fold, fold_verb2, fold_verb3,
fold_verbs) reduce the outcome to one application value.

Verb folds are for parsers configured with several subcommands: the parsed
value is one of several verb types, and the handler is picked by exact
runtime type in declared order. A parsed value whose type no handler covers
raises UnmatchedVerbError. That means the parser's verb set and the handlers
disagree, so it is raised rather than answered with a default.

Example:
    >>> from argresult import Parsed
    >>> class Add: ...
    >>> class Commit: ...
    >>> fold_verb2(
    ...     Parsed(Commit()),
    ...     (Add, lambda o: "add"),
    ...     (Commit, lambda o: "commit"),
    ...     lambda errors: "usage",
    ... )
    'commit'
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, TypeAlias, TypeVar

from argresult.errors import UnmatchedVerbError, qualname

from .result import Errors, ParserResult
from .verbs import VerbHandler, as_handler

T = TypeVar("T")
V = TypeVar("V")
R = TypeVar("R")

logger = logging.getLogger("argresult.combinators")

HandlerLike: TypeAlias = "VerbHandler[Any, R] | tuple[type, Callable[[Any], R]]"


# ═════════════════════════════════════════════════════════════════════════════
# Effects
# ═════════════════════════════════════════════════════════════════════════════


def with_parsed(result: ParserResult[T], action: Callable[[T], object]) -> ParserResult[T]:
    """Run ``action(value)`` if the result parsed. Returns ``result``."""
    return result.with_parsed(action)


def with_parsed_verb(
    result: ParserResult[Any],
    verb_type: type[V],
    action: Callable[[V], object],
) -> ParserResult[Any]:
    """Run ``action(value)`` if the result parsed to exactly ``verb_type``. Returns ``result``."""
    return result.with_parsed_verb(verb_type, action)


def with_not_parsed(result: ParserResult[T], action: Callable[[Errors], object]) -> ParserResult[T]:
    """Run ``action(errors)`` if the result did not parse. Returns ``result``."""
    return result.with_not_parsed(action)


async def with_parsed_async(
    result: ParserResult[T],
    action: Callable[[T], Awaitable[object]],
) -> ParserResult[T]:
    """Await ``action(value)`` if the result parsed. Returns ``result``."""
    if result.is_parsed():
        await action(result.value)
    return result


async def with_not_parsed_async(
    result: ParserResult[T],
    action: Callable[[Errors], Awaitable[object]],
) -> ParserResult[T]:
    """Await ``action(errors)`` if the result did not parse. Returns ``result``."""
    if result.is_not_parsed():
        await action(result.errors)
    return result


# ═════════════════════════════════════════════════════════════════════════════
# Folds
# ═════════════════════════════════════════════════════════════════════════════


def fold(
    result: ParserResult[T],
    parsed_fn: Callable[[T], R],
    not_parsed_fn: Callable[[Errors], R],
) -> R:
    """Transform the result into another value.

    Returns ``parsed_fn(value)`` on success, ``not_parsed_fn(errors)`` on failure.
    """
    return result.fold(parsed_fn, not_parsed_fn)


def fold_verbs(
    result: ParserResult[Any],
    *handlers: HandlerLike[R],
    not_parsed: Callable[[Errors], R],
) -> R:
    """Transform a multi-verb result into another value.

    Args:
        result: Result whose parsed value is one of several verb types
        *handlers: ``VerbHandler``s or ``(verb_type, fn)`` pairs, checked in order
        not_parsed: Called with the errors when the result did not parse

    Returns:
        Output of the first handler whose type is exactly the value's type,
        or of ``not_parsed``

    A failed result goes straight to ``not_parsed``; handlers are only
    validated when there is a parsed value to dispatch.

    Raises:
        UnmatchedVerbError: The value's type matches none of the handlers
        ValueError: No handlers were given for a parsed result
    """
    if result.is_not_parsed():
        return not_parsed(result.errors)

    if not handlers:
        raise ValueError("fold_verbs() requires at least one verb handler")
    resolved = [as_handler(h) for h in handlers]

    value = result.value
    for handler in resolved:
        if handler.matches(value):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("dispatching verb %s", qualname(handler.verb_type))
            return handler(value)

    expected = tuple(h.verb_type for h in resolved)
    exc = UnmatchedVerbError.for_value(value, expected)
    logger.error("verb dispatch failed: %s", exc.error.render())
    raise exc


def fold_verb2(
    result: ParserResult[Any],
    handler1: HandlerLike[R],
    handler2: HandlerLike[R],
    not_parsed_fn: Callable[[Errors], R],
) -> R:
    """Two-verb fold. See fold_verbs()."""
    return fold_verbs(result, handler1, handler2, not_parsed=not_parsed_fn)


def fold_verb3(
    result: ParserResult[Any],
    handler1: HandlerLike[R],
    handler2: HandlerLike[R],
    handler3: HandlerLike[R],
    not_parsed_fn: Callable[[Errors], R],
) -> R:
    """Three-verb fold. See fold_verbs()."""
    return fold_verbs(result, handler1, handler2, handler3, not_parsed=not_parsed_fn)
