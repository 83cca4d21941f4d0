# parser/lexer.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Lexical analyzer for canonical expression text using SLY

"""Lexical analyzer for normalized boolean expressions.

This module tokenizes text that has already been through the normalizer,
so operators only appear as their canonical symbols. Illegal characters do
not stop tokenization: they are emitted as ``ERROR`` tokens so that the
validator can report the first one as a value instead of an exception.

Supported Tokens:
- Operators: ¬, ⋀, ⋁, ➔, (, )
- Keywords: true, false (any case)
- Variables: one or more letters, including non-ASCII letters
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class ExpressionLexer(Lexer):
    """SLY-based lexer for canonical boolean expressions.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VARIABLE",
        "TRUE",
        "FALSE",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"¬"
    AND = r"⋀"
    OR = r"⋁"
    IMPLIES = r"➔"
    LPAREN = r"\("
    RPAREN = r"\)"

    @_(r"[^\W\d_]+")
    def VARIABLE(self, t):
        """Letters only; true/false in any case are constants."""
        keyword = t.value.lower()
        if keyword == "true":
            t.type = "TRUE"
        elif keyword == "false":
            t.type = "FALSE"
        return t

    def error(self, t):
        """Turn an illegal character into an ERROR token and continue.

        Args:
            t: SLY token whose value holds the rest of the input

        Returns:
            The token, narrowed to the single offending character
        """
        logger = get_logger()
        logger.debug(f"Illegal character '{t.value[0]}' at position {self.index}")

        t.value = t.value[0]
        self.index += 1
        return t
