"""aoc.errors
==============

Exception taxonomy shared by the loader, the puzzle modules and the runner.

Only :class:`InvalidArguments` and :class:`MissingConfiguration` abort the
process. Everything else is raised from parsing or solving, propagates
untouched to :func:`aoc.runner.run_puzzle` and is reported there once.
"""

from __future__ import annotations


class AdventError(Exception):
    """Base class for every failure the runner knows how to report."""


class InvalidArguments(AdventError):
    """Missing or malformed year/day token on the command line."""


class MissingConfiguration(AdventError):
    """The input root directory is not configured in the environment."""


class UnknownPuzzle(AdventError, LookupError):
    """No solution is registered for the requested year and day."""


class IOFailure(AdventError):
    """The input file could not be read or decoded."""


class MalformedInput(AdventError, ValueError):
    """Input text violates the puzzle grammar or a checked assumption."""


class EmptyInput(AdventError):
    """A reduction was asked to reduce nothing."""


class NoSolutionFound(AdventError):
    """An exhaustive search ran out of candidates."""


class InvalidState(AdventError, RuntimeError):
    """Internal bookkeeping reached a state that should be unreachable."""


__all__ = [
    "AdventError",
    "InvalidArguments",
    "MissingConfiguration",
    "UnknownPuzzle",
    "IOFailure",
    "MalformedInput",
    "EmptyInput",
    "NoSolutionFound",
    "InvalidState",
]
