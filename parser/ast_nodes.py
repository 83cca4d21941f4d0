# parser/ast_nodes.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Abstract Syntax Tree node classes for propositional expressions

"""AST node classes for representing parsed boolean expressions.

This module defines immutable and hashable node classes used to build tree
representations of propositional logic expressions. Every transformation
produces a new tree; nodes are never mutated after construction, so equal
subtrees compare equal and can be used as dictionary keys.

Node Types:
    Variable: Propositional variable (one or more letters)
    Constant: Boolean constant introduced by simplification or typed as true/false
    Not, And, Or, Implies: Standard propositional connectives

String rendering uses the canonical operator symbols and inserts only the
parentheses required by precedence, so that ``parse(str(tree)) == tree``.

Precedence (tightest to loosest): NOT, AND, OR, IMPLIES. AND and OR are
left-associative, IMPLIES is right-associative.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Tuple

NOT_SYMBOL = "¬"
AND_SYMBOL = "⋀"
OR_SYMBOL = "⋁"
IMPLIES_SYMBOL = "➔"

# Binding strength used for rendering, higher binds tighter
_IMPLIES_PREC = 1
_OR_PREC = 2
_AND_PREC = 3
_NOT_PREC = 4
_ATOM_PREC = 5


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_variable(self, n: Variable): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes.

    Concrete node types implement ``accept`` for visitor dispatch,
    ``children`` for generic traversal and ``__str__`` for rendering.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def children(self) -> Tuple[Expr, ...]:
        """Return the direct operands of this node, left to right."""
        return ()

    @property
    def precedence(self) -> int:
        return _ATOM_PREC

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable.

    Attributes:
        name: The variable name; identity is plain string equality
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant ``True`` or ``False``.

    Attributes:
        value: The truth value of this constant
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        return "True" if self.value else "False"


TRUE = Constant(True)
FALSE = Constant(False)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    @property
    def precedence(self) -> int:
        return _NOT_PREC

    def __str__(self) -> str:
        if self.operand.precedence < _NOT_PREC:
            return f"{NOT_SYMBOL}({self.operand})"
        return f"{NOT_SYMBOL}{self.operand}"


@dataclass(frozen=True, slots=True)
class _Binary(Expr):
    """Shared rendering for binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def _render(self, symbol: str, right_assoc: bool = False) -> str:
        prec = self.precedence
        left = str(self.left)
        right = str(self.right)

        # A same-precedence child on the non-associative side needs grouping
        if self.left.precedence < prec or (
            right_assoc and self.left.precedence == prec
        ):
            left = f"({left})"
        if self.right.precedence < prec or (
            not right_assoc and self.right.precedence == prec
        ):
            right = f"({right})"

        return f"{left}{symbol}{right}"


@dataclass(frozen=True, slots=True)
class And(_Binary):
    """Logical conjunction, true when both operands are true."""

    def accept(self, v: Visitor):
        return v.visit_and(self)

    @property
    def precedence(self) -> int:
        return _AND_PREC

    def __str__(self) -> str:
        return self._render(AND_SYMBOL)


@dataclass(frozen=True, slots=True)
class Or(_Binary):
    """Logical disjunction, true when at least one operand is true."""

    def accept(self, v: Visitor):
        return v.visit_or(self)

    @property
    def precedence(self) -> int:
        return _OR_PREC

    def __str__(self) -> str:
        return self._render(OR_SYMBOL)


@dataclass(frozen=True, slots=True)
class Implies(_Binary):
    """Material implication, false only when left is true and right is false."""

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    @property
    def precedence(self) -> int:
        return _IMPLIES_PREC

    def __str__(self) -> str:
        return self._render(IMPLIES_SYMBOL, right_assoc=True)


def _pre_order(roots: Iterable[Expr]) -> Iterable[Expr]:
    """Yield nodes top-down, left to right, without recursion."""
    stack: List[Expr] = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children()))


def variables(*exprs: Expr) -> Tuple[str, ...]:
    """Collect distinct variable names in order of first appearance.

    Args:
        exprs: Expressions to scan, in order

    Returns:
        Tuple of variable names, each listed once
    """
    seen = {}
    for node in _pre_order(exprs):
        if isinstance(node, Variable):
            seen.setdefault(node.name, None)
    return tuple(seen)


def size(expr: Expr) -> int:
    """Count the nodes in a tree."""
    return sum(1 for _ in _pre_order([expr]))


def depth(expr: Expr) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    deepest = 0
    stack = [(expr, 1)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in node.children())
    return deepest


def subexpressions(expr: Expr, hide_intermediate: bool = False) -> Tuple[Expr, ...]:
    """Decompose an expression into truth table columns.

    Columns are the variables in first-appearance order, then every distinct
    compound sub-expression bottom-up, and finally the expression itself.
    Constants never get a column of their own unless they are the whole
    expression.

    Args:
        expr: Root of the tree to decompose
        hide_intermediate: Keep only the variables and the whole expression

    Returns:
        Ordered tuple of distinct expressions
    """
    columns = {Variable(name): None for name in variables(expr)}

    if not hide_intermediate:
        for node in _post_order(expr):
            if node.children() and node != expr:
                columns.setdefault(node, None)

    columns.setdefault(expr, None)
    return tuple(columns)


def _post_order(expr: Expr) -> List[Expr]:
    """Return nodes bottom-up, left to right."""
    ordered: List[Expr] = []
    stack = [(expr, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            ordered.append(node)
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.children()))
    return ordered
