# parser/validator.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Lexical, structural and size validation of normalized expressions

"""Validation of normalized expression text.

The validator runs before any parse is attempted and reports the first
violation it finds as a ``ValidationError`` value. Checks run in a fixed
order, each failing fast:

1. Empty input                                  -> MissingCharacter
2. Characters outside the canonical alphabet    -> InvalidCharacter
3. Token order (adjacent atoms, dangling
   operators, empty groups)                     -> InvalidCharacter
   Unmatched or unclosed parentheses            -> MissingCharacter
4. Too many distinct variables, operands
   or operators                                 -> TooBigExpression

Validation is pure: the same text and limits always give the same answer.
"""

from typing import List, Optional

from .exceptions import ErrorKind, ValidationError
from .lexer import ExpressionLexer
from utils.logger import get_logger

MAX_VARIABLES = 12
MAX_OPERANDS = 48
MAX_OPERATORS = 96

_ATOMS = {"VARIABLE", "TRUE", "FALSE"}
_BINARY_OPERATORS = {"AND", "OR", "IMPLIES"}
_OPERATORS = _BINARY_OPERATORS | {"NOT"}


def validate(
    text: str,
    max_variables: int = MAX_VARIABLES,
    max_operands: int = MAX_OPERANDS,
    max_operators: int = MAX_OPERATORS,
) -> Optional[ValidationError]:
    """Check that normalized text is a legal expression.

    Args:
        text: Expression text produced by the normalizer
        max_variables: Maximum number of distinct variables
        max_operands: Maximum number of variable and constant occurrences
        max_operators: Maximum number of operator occurrences

    Returns:
        None when the expression is legal, otherwise the first violation
    """
    logger = get_logger()
    logger.debug(f"Validating expression: {text}")

    if not text.strip():
        return _reject(ValidationError(ErrorKind.MISSING_CHARACTER, position=0))

    tokens = list(ExpressionLexer().tokenize(text))

    for token in tokens:
        if token.type == "ERROR":
            return _reject(
                ValidationError(
                    ErrorKind.INVALID_CHARACTER,
                    position=token.index,
                    character=token.value,
                )
            )

    error = _check_structure(tokens, len(text)) or _check_size(
        tokens, max_variables, max_operands, max_operators
    )
    if error is not None:
        return _reject(error)

    logger.validation_result(True, f"Expression is legal: {text}")
    return None


def _check_structure(tokens: List, end: int) -> Optional[ValidationError]:
    """Scan tokens alternating between expecting an operand and an operator."""
    expect_operand = True
    open_parens: List[int] = []

    for token in tokens:
        if expect_operand:
            if token.type in _ATOMS:
                expect_operand = False
            elif token.type == "LPAREN":
                open_parens.append(token.index)
            elif token.type != "NOT":
                # Binary operator or ")" with nothing to apply to
                return ValidationError(
                    ErrorKind.INVALID_CHARACTER,
                    position=token.index,
                    character=token.value,
                )
        elif token.type in _BINARY_OPERATORS:
            expect_operand = True
        elif token.type == "RPAREN":
            if not open_parens:
                return ValidationError(
                    ErrorKind.MISSING_CHARACTER, position=token.index, character="("
                )
            open_parens.pop()
        else:
            # Two operands next to each other with no connective
            return ValidationError(
                ErrorKind.INVALID_CHARACTER,
                position=token.index,
                character=token.value,
            )

    if open_parens:
        return ValidationError(
            ErrorKind.MISSING_CHARACTER, position=end, character=")"
        )

    if expect_operand:
        return ValidationError(ErrorKind.INVALID_CHARACTER, position=end)

    return None


def _check_size(
    tokens: List, max_variables: int, max_operands: int, max_operators: int
) -> Optional[ValidationError]:
    """Bound distinct variables, operand occurrences and operator occurrences."""
    names = {token.value for token in tokens if token.type == "VARIABLE"}
    if len(names) > max_variables:
        return ValidationError(
            ErrorKind.TOO_BIG_EXPRESSION, count=len(names), limit=max_variables
        )

    operands = sum(1 for token in tokens if token.type in _ATOMS)
    if operands > max_operands:
        return ValidationError(
            ErrorKind.TOO_BIG_EXPRESSION, count=operands, limit=max_operands
        )

    operators = sum(1 for token in tokens if token.type in _OPERATORS)
    if operators > max_operators:
        return ValidationError(
            ErrorKind.TOO_BIG_EXPRESSION, count=operators, limit=max_operators
        )

    return None


def _reject(error: ValidationError) -> ValidationError:
    get_logger().validation_result(False, f"{error.kind} at position {error.position}")
    return error
