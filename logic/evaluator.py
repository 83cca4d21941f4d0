# logic/evaluator.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Truth value evaluation of expression trees

"""Evaluates an expression tree under a variable assignment.

Standard two-valued semantics: ``Not(x) = not x``, ``And(a, b) = a and b``,
``Or(a, b) = a or b``, ``Implies(a, b) = not a or b``.
"""

from typing import Mapping

from parser import ast_nodes as ast


class Evaluator(ast.Visitor):
    """Visitor computing the truth value of a tree for one assignment.

    Attributes:
        assignment: Truth value for every variable in the tree
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def evaluate(self, expr: ast.Expr) -> bool:
        return expr.accept(self)

    def visit_variable(self, n: ast.Variable) -> bool:
        try:
            return self.assignment[n.name]
        except KeyError:
            raise KeyError(f"No truth value assigned to variable '{n.name}'") from None

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        return n.left.accept(self) and n.right.accept(self)

    def visit_or(self, n: ast.Or) -> bool:
        return n.left.accept(self) or n.right.accept(self)

    def visit_implies(self, n: ast.Implies) -> bool:
        return (not n.left.accept(self)) or n.right.accept(self)


def evaluate(expr: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate ``expr`` with the given variable values.

    Args:
        expr: Expression tree
        assignment: Mapping from every variable name in ``expr`` to a bool

    Returns:
        Truth value of the expression

    Raises:
        KeyError: A variable in ``expr`` has no value in ``assignment``
    """
    return Evaluator(assignment).evaluate(expr)
