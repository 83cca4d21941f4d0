# core/messages.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Human readable, language-specific error messages

from parser.exceptions import ErrorKind, ValidationError
from .config import Language

_MESSAGES = {
    Language.ENGLISH: {
        "empty": "The expression is empty",
        "invalid": "Illegal character '{character}' at position {position}",
        "unexpected_end": "The expression ends unexpectedly at position {position}",
        "missing": "Missing character '{character}' at position {position}",
        "too_big": "The expression is too big: {count} exceeds the limit of {limit}",
    },
    Language.NORWEGIAN_BOKMAAL: {
        "empty": "Uttrykket er tomt",
        "invalid": "Ugyldig tegn '{character}' på posisjon {position}",
        "unexpected_end": "Uttrykket slutter uventet på posisjon {position}",
        "missing": "Mangler tegnet '{character}' på posisjon {position}",
        "too_big": "Uttrykket er for stort: {count} overskrider grensen på {limit}",
    },
}


def _message_key(error: ValidationError) -> str:
    if error.kind is ErrorKind.TOO_BIG_EXPRESSION:
        return "too_big"
    if error.kind is ErrorKind.MISSING_CHARACTER:
        return "missing" if error.character else "empty"
    return "invalid" if error.character else "unexpected_end"


def render(error: ValidationError, language: Language = Language.ENGLISH) -> str:
    """Format a validation error for display.

    Args:
        error: Error returned by the validator
        language: Message language

    Returns:
        Message text in the requested language
    """
    template = _MESSAGES[language][_message_key(error)]
    return template.format(
        character=error.character,
        position=error.position,
        count=error.count,
        limit=error.limit,
    )
