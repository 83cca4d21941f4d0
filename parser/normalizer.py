# parser/normalizer.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Operator alias canonicalization applied before validation

"""Rewrites operator aliases into the canonical operator symbols.

Users may type ``A and not B``, ``A && !B`` or ``A ∧ ¬B``; all of them are
turned into ``A⋀¬B`` style text before the validator and parser see them.
The alias table is plain data: extending it needs no change to the
normalization logic. Nothing is validated here, unrecognized characters
pass through untouched.
"""

import re
from typing import Dict, List, Tuple

from .ast_nodes import AND_SYMBOL, IMPLIES_SYMBOL, NOT_SYMBOL, OR_SYMBOL
from utils.logger import get_logger

# Canonical symbol -> accepted spellings. Word forms match case-insensitively
# and only as whole words.
ALIASES: Dict[str, Tuple[str, ...]] = {
    NOT_SYMBOL: ("not", "!", "~", "¬"),
    AND_SYMBOL: ("and", "&&", "&", "∧", "⋀"),
    OR_SYMBOL: ("or", "||", "|", "∨", "⋁"),
    IMPLIES_SYMBOL: ("implies", "->", "=>", "→", "⇒", "➔"),
}

_LETTER = r"[^\W\d_]"


def _build_pattern(aliases: Dict[str, Tuple[str, ...]]) -> Tuple["re.Pattern", Dict[str, str]]:
    """Compile one alternation regex for the whole alias table.

    Returns:
        The compiled pattern and a lookup from lower-cased alias to symbol
    """
    lookup = {
        alias.lower(): symbol
        for symbol, spellings in aliases.items()
        for alias in spellings
    }

    # Longest first so "&&" wins over "&" and "->" is not split
    ordered = sorted(lookup, key=len, reverse=True)
    alternatives = []
    for alias in ordered:
        if alias.isalpha():
            alternatives.append(f"(?<!{_LETTER}){re.escape(alias)}(?!{_LETTER})")
        else:
            alternatives.append(re.escape(alias))

    return re.compile("|".join(alternatives), re.IGNORECASE), lookup


_ALIAS_PATTERN, _ALIAS_LOOKUP = _build_pattern(ALIASES)


def normalize(text: str, case_sensitive: bool = False) -> str:
    """Canonicalize case and operator spelling of an expression.

    Args:
        text: Raw expression text
        case_sensitive: Keep variable case; otherwise lower-case everything first

    Returns:
        Text with every operator alias replaced by its canonical symbol

    Example:
        >>> normalize("A and not B")
        'a ⋀ ¬ b'
    """
    return normalize_with_offsets(text, case_sensitive)[0]


def normalize_with_offsets(
    text: str, case_sensitive: bool = False
) -> Tuple[str, List[int]]:
    """Canonicalize an expression and map positions back to the raw text.

    Args:
        text: Raw expression text
        case_sensitive: Keep variable case; otherwise lower-case everything first

    Returns:
        The normalized text, and a list whose entry ``i`` is the index in
        ``text`` of normalized character ``i``. The list has one extra
        entry for the end of the text.

    Example:
        >>> normalize_with_offsets("a and b", case_sensitive=True)
        ('a ⋀ b', [0, 1, 2, 5, 6, 7])
    """
    logger = get_logger()

    if not case_sensitive:
        text = _lower(text)
        logger.debug(f"Expression converted to lowercase: {text}")

    pieces: List[str] = []
    offsets: List[int] = []
    last = 0
    for match in _ALIAS_PATTERN.finditer(text):
        start, end = match.span()
        pieces.append(text[last:start])
        offsets.extend(range(last, start))
        pieces.append(_ALIAS_LOOKUP[match.group(0).lower()])
        offsets.append(start)
        last = end

    pieces.append(text[last:])
    offsets.extend(range(last, len(text)))
    offsets.append(len(text))

    normalized = "".join(pieces)
    logger.debug(f"Expression changed to: {normalized}")
    return normalized, offsets


def _lower(text: str) -> str:
    """Lower-case one character at a time without changing the length.

    Characters whose lower-case form is more than one character long
    (``İ`` becomes ``i`` plus a combining dot) are kept as typed.
    """
    lowered = []
    for char in text:
        lower = char.lower()
        lowered.append(lower if len(lower) == 1 else char)
    return "".join(lowered)
