"""Option types shared by the argresult tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Options:
    verbose: bool = False


@dataclass
class AddOptions:
    path: str = "."


@dataclass
class CommitOptions:
    message: str = ""


@dataclass
class PushOptions:
    remote: str = "origin"


@dataclass
class AmendOptions(CommitOptions):
    """Subclass of a verb type; never matches CommitOptions handlers."""
