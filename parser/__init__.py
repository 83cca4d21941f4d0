# parser/__init__.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Normalization, validation and parsing of propositional expressions

"""Front half of the expression pipeline: text in, AST out.

Processing order:
    normalize: canonicalize case and operator aliases
    validate: report the first lexical, structural or size violation
    parse: build an immutable AST from validated text

Grammar Features:
    - Four connectives: ¬ (NOT), ⋀ (AND), ⋁ (OR), ➔ (IMPLIES)
    - Precedence NOT > AND > OR > IMPLIES, IMPLIES right-associative
    - Parenthetical grouping
    - Constants true/false

Example:
    >>> from parser import normalize, validate, parse
    >>> text = normalize("A and not B", case_sensitive=True)
    >>> validate(text) is None
    True
    >>> str(parse(text))
    'A⋀¬B'
"""

from .ast_nodes import depth, size
from .exceptions import ErrorKind, ParseError, ValidationError
from .grammar import _ExpressionParser
from .normalizer import normalize, normalize_with_offsets
from .validator import validate
from utils.logger import get_logger

MAX_DEPTH = 256


def parse(source: str, max_depth: int = MAX_DEPTH):
    """Parse a normalized expression string into an AST.

    A fresh parser instance is used for every call, so parsing keeps no
    state between calls. The text is expected to have passed ``validate``;
    anything else is reported as ``ParseError``.

    Args:
        source: Normalized, validated expression text
        max_depth: Deepest tree accepted before giving up

    Returns:
        Root AST node

    Raises:
        ParseError: Malformed text, or a tree deeper than ``max_depth``
    """
    logger = get_logger()
    logger.debug(f"Parsing expression: {source}")

    result = _ExpressionParser().parse(source)

    tree_depth = depth(result)
    if tree_depth > max_depth:
        raise ParseError(
            f"Expression nesting depth {tree_depth} exceeds the limit of {max_depth}"
        )

    logger.debug(f"Parsed tree with {size(result)} nodes, depth {tree_depth}")
    return result


__all__ = [
    "normalize",
    "normalize_with_offsets",
    "validate",
    "parse",
    "ErrorKind",
    "ParseError",
    "ValidationError",
]
