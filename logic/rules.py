# logic/rules.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Catalog of algebraic rewrite rules used by the simplifier

"""Ordered catalog of boolean rewrite rules.

Each rule looks at a single node and either returns the rewritten node or
``None`` when it does not apply. Rules never look further than the node's
own children and grandchildren, and never mutate anything; the simplifier
decides where in the tree a rule is tried.

Catalog order is priority order. Implication elimination comes first so
that every later rule only has to deal with NOT, AND and OR. Apart from
implication elimination every rule strictly shrinks the tree, and no rule
introduces an implication, which is what makes rewriting terminate.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from parser.ast_nodes import And, Constant, Expr, Implies, Not, Or, TRUE, FALSE

RewriteFn = Callable[[Expr], Optional[Expr]]


@dataclass(frozen=True)
class Rule:
    """Named rewrite applied to a single node.

    Attributes:
        name: Human readable rule name, reported in simplification steps
        rewrite: Returns the replacement node, or None if the rule does not match
    """

    name: str
    rewrite: RewriteFn

    def apply(self, node: Expr) -> Optional[Expr]:
        return self.rewrite(node)


def _is_negation_of(a: Expr, b: Expr) -> bool:
    """True if one operand is exactly the negation of the other."""
    return (isinstance(a, Not) and a.operand == b) or (
        isinstance(b, Not) and b.operand == a
    )


def eliminate_implication(node: Expr) -> Optional[Expr]:
    """A➔B  =>  ¬A⋁B"""
    if isinstance(node, Implies):
        return Or(Not(node.left), node.right)
    return None


def double_negation(node: Expr) -> Optional[Expr]:
    """¬¬A  =>  A"""
    if isinstance(node, Not) and isinstance(node.operand, Not):
        return node.operand.operand
    return None


def negated_constant(node: Expr) -> Optional[Expr]:
    """¬True  =>  False, ¬False  =>  True"""
    if isinstance(node, Not) and isinstance(node.operand, Constant):
        return Constant(not node.operand.value)
    return None


def complement(node: Expr) -> Optional[Expr]:
    """A⋀¬A  =>  False, A⋁¬A  =>  True (either operand order)"""
    if isinstance(node, (And, Or)) and _is_negation_of(node.left, node.right):
        return FALSE if isinstance(node, And) else TRUE
    return None


def annihilation(node: Expr) -> Optional[Expr]:
    """A⋀False  =>  False, A⋁True  =>  True (either operand order)"""
    if isinstance(node, And) and FALSE in (node.left, node.right):
        return FALSE
    if isinstance(node, Or) and TRUE in (node.left, node.right):
        return TRUE
    return None


def identity(node: Expr) -> Optional[Expr]:
    """A⋀True  =>  A, A⋁False  =>  A (either operand order)"""
    if isinstance(node, And):
        neutral = TRUE
    elif isinstance(node, Or):
        neutral = FALSE
    else:
        return None

    if node.right == neutral:
        return node.left
    if node.left == neutral:
        return node.right
    return None


def idempotence(node: Expr) -> Optional[Expr]:
    """A⋀A  =>  A, A⋁A  =>  A"""
    if isinstance(node, (And, Or)) and node.left == node.right:
        return node.left
    return None


def absorption(node: Expr) -> Optional[Expr]:
    """A⋀(A⋁B)  =>  A, A⋁(A⋀B)  =>  A (any operand order)"""
    if isinstance(node, And):
        inner_type = Or
    elif isinstance(node, Or):
        inner_type = And
    else:
        return None

    for outer, inner in ((node.left, node.right), (node.right, node.left)):
        if isinstance(inner, inner_type) and outer in (inner.left, inner.right):
            return outer
    return None


def de_morgan(node: Expr) -> Optional[Expr]:
    """¬(¬A⋀¬B)  =>  A⋁B, ¬(¬A⋁¬B)  =>  A⋀B"""
    if not isinstance(node, Not):
        return None

    inner = node.operand
    if (
        isinstance(inner, (And, Or))
        and isinstance(inner.left, Not)
        and isinstance(inner.right, Not)
    ):
        dual = Or if isinstance(inner, And) else And
        return dual(inner.left.operand, inner.right.operand)
    return None


RULES: Tuple[Rule, ...] = (
    Rule("Implication elimination", eliminate_implication),
    Rule("Double negation", double_negation),
    Rule("Negated constant", negated_constant),
    Rule("Complement law", complement),
    Rule("Annihilation law", annihilation),
    Rule("Identity law", identity),
    Rule("Idempotent law", idempotence),
    Rule("Absorption law", absorption),
    Rule("De Morgan's law", de_morgan),
)
