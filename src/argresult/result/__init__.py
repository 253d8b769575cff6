"""Parser results and the combinators that consume them.

Example:
    >>> from argresult.result import NotParsed, Parsed, fold, fold_verb2
    >>>
    >>> fold(NotParsed(["unknown option --x"]), lambda v: 0, len)
    1
"""

from .combinators import (
    fold,
    fold_verb2,
    fold_verb3,
    fold_verbs,
    with_not_parsed,
    with_not_parsed_async,
    with_parsed,
    with_parsed_async,
    with_parsed_verb,
)
from .result import Errors, NotParsed, Parsed, ParserResult, ParserResultType, TypeInfo
from .verbs import VerbHandler, as_handler, verb

__all__ = [
    # Core types
    "ParserResult",
    "ParserResultType",
    "TypeInfo",
    "Errors",
    "Parsed",
    "NotParsed",
    # Verb handlers
    "VerbHandler",
    "verb",
    "as_handler",
    # Effects
    "with_parsed",
    "with_parsed_verb",
    "with_not_parsed",
    "with_parsed_async",
    "with_not_parsed_async",
    # Folds
    "fold",
    "fold_verbs",
    "fold_verb2",
    "fold_verb3",
]
