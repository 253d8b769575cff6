"""argresult - combinators for command-line parser results.

A parser hands back either the options object it built or the errors it hit.
argresult lets application code react to that outcome without branching on
it, including parsers with several verbs (subcommands) where the parsed value
may be any one of several option types.

Quick Start:
    >>> from argresult import NotParsed, Parsed, fold, with_not_parsed, with_parsed
    >>>
    >>> result = Parsed({"verbose": True})
    >>> seen = []
    >>> with_not_parsed(with_parsed(result, seen.append), seen.append) is result
    True
    >>> seen
    [{'verbose': True}]

Verbs:
    >>> from argresult import fold_verb2, verb
    >>> class AddOptions: ...
    >>> class CommitOptions:
    ...     def __init__(self, message: str) -> None:
    ...         self.message = message
    >>> fold_verb2(
    ...     Parsed(CommitOptions("x")),
    ...     verb(AddOptions, lambda o: "add"),
    ...     verb(CommitOptions, lambda o: f"commit {o.message}"),
    ...     lambda errors: f"{len(errors)} error(s)",
    ... )
    'commit x'
"""

from .config import ArgResultSettings, LoggingSettings, clear_settings_cache, get_settings
from .errors import ArgResultException, DispatchError, ErrorCode, NotParsedError, UnmatchedVerbError
from .observability import configure_logging, get_logger
from .result import (
    Errors,
    NotParsed,
    Parsed,
    ParserResult,
    ParserResultType,
    TypeInfo,
    VerbHandler,
    as_handler,
    fold,
    fold_verb2,
    fold_verb3,
    fold_verbs,
    verb,
    with_not_parsed,
    with_not_parsed_async,
    with_parsed,
    with_parsed_async,
    with_parsed_verb,
)

__version__ = "0.1.0"

__all__ = [
    # Results
    "ParserResult", "ParserResultType", "TypeInfo", "Errors", "Parsed", "NotParsed",
    # Verbs
    "VerbHandler", "verb", "as_handler",
    # Combinators
    "with_parsed", "with_parsed_verb", "with_not_parsed",
    "with_parsed_async", "with_not_parsed_async",
    "fold", "fold_verbs", "fold_verb2", "fold_verb3",
    # Errors
    "ErrorCode", "DispatchError", "ArgResultException", "UnmatchedVerbError", "NotParsedError",
    # Config & logging
    "ArgResultSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
