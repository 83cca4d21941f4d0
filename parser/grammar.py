# parser/grammar.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# LALR(1) grammar and parser for boolean expressions using SLY

"""Boolean expression grammar implemented with the SLY parser generator.

The parser builds immutable AST nodes from the token stream produced by
``ExpressionLexer``. Ambiguity in the flat ``expr`` grammar is resolved by
the precedence table.

Operator Precedence (lowest to highest):
- IMPLIES ('➔'): right-associative
- OR ('⋁'): left-associative
- AND ('⋀'): left-associative
- NOT ('¬'): right-associative
"""

from sly import Parser
from .lexer import ExpressionLexer
from .ast_nodes import Expr, Variable, Not, And, Or, Implies, TRUE, FALSE
from .exceptions import ParseError
from utils.logger import get_logger


class _ExpressionParser(Parser):
    """SLY-based LALR(1) parser for canonical boolean expressions.

    Attributes:
        tokens: Token types from ExpressionLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = ExpressionLexer.tokens

    precedence = (
        ("right", "IMPLIES"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        return p.expr

    @_("expr IMPLIES expr")
    def expr(self, p) -> Expr:
        return Implies(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        return Or(p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        return And(p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Expr:
        return Not(p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        return p.expr

    @_("VARIABLE")
    def expr(self, p) -> Expr:
        return Variable(p.VARIABLE)

    @_("TRUE")
    def expr(self, p) -> Expr:
        return TRUE

    @_("FALSE")
    def expr(self, p) -> Expr:
        return FALSE

    def parse(self, text: str) -> Expr:
        """Parse canonical expression text into an AST.

        Args:
            text: Normalized expression string

        Returns:
            Root AST node

        Raises:
            ParseError: If the text is empty or not a well-formed expression
        """
        logger = get_logger()

        try:
            result = super().parse(ExpressionLexer().tokenize(text))
        except ParseError:
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

        if result is None:
            if text.strip() == "":
                raise ParseError("Input expression is empty.")
            raise ParseError("Failed to parse expression (syntax error).")

        logger.debug(f"Successfully parsed expression into {type(result).__name__}")
        return result

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always
        """
        if token:
            raise ParseError(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        raise ParseError("Syntax error: Unexpected end of expression")
