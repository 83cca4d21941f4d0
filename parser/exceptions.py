# parser/exceptions.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Error taxonomy for expression validation and parsing

"""Error types for boolean expression processing.

Validation problems with user input are values, not exceptions: the
validator returns a ``ValidationError`` describing the first violation and
the caller decides what to do with it. ``ParseError`` is only raised when
the parser receives text the validator should already have rejected, or
when a tree exceeds the recursion safety ceiling.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of an illegal expression."""

    INVALID_CHARACTER = "InvalidCharacter"
    MISSING_CHARACTER = "MissingCharacter"
    TOO_BIG_EXPRESSION = "TooBigExpression"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ValidationError:
    """First violation found in an expression.

    Attributes:
        kind: Error category
        position: Index into the validated text, if the error has one
        character: Offending character or token text, if any
        count: Offending size for ``TOO_BIG_EXPRESSION``
        limit: Configured limit for ``TOO_BIG_EXPRESSION``
    """

    kind: ErrorKind
    position: Optional[int] = None
    character: Optional[str] = None
    count: Optional[int] = None
    limit: Optional[int] = None


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails.

    Indicates that text reached the parser without passing validation, or
    that the resulting tree is deeper than the parser's safety ceiling.
    """

    pass
