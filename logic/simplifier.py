# logic/simplifier.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Fixpoint rewriting of expression trees with a recorded step log

"""Rule-based simplification of boolean expression trees.

The simplifier repeatedly picks the highest priority rule that matches
anywhere in the tree, applies it at the first matching node (pre-order,
top-down, left to right) and records a ``SimplificationStep`` holding the
whole tree before and after the rewrite. It stops at the fixpoint, when no
rule matches, or after ``max_iterations`` rewrites as a termination guard.

The result is logically equivalent to the input under every assignment,
and simplifying a result again fires no rule.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger
from .rules import RULES, Rule

MAX_ITERATIONS = 1000


@dataclass(frozen=True)
class SimplificationStep:
    """One applied rewrite.

    Attributes:
        rule: Name of the rule that fired
        before: Whole expression before the rewrite
        after: Whole expression after the rewrite
    """

    rule: str
    before: str
    after: str

    def to_dict(self) -> Dict[str, str]:
        return {"rule": self.rule, "before": self.before, "after": self.after}


class Simplifier:
    """Drives the rule catalog over a tree until nothing changes.

    Attributes:
        rules: Rules in priority order
        max_iterations: Upper bound on rewrites for a single call
    """

    def __init__(
        self, rules: Sequence[Rule] = RULES, max_iterations: int = MAX_ITERATIONS
    ):
        self.rules = tuple(rules)
        self.max_iterations = max_iterations

    def simplify(self, root: ast.Expr) -> Tuple[ast.Expr, List[SimplificationStep]]:
        """Rewrite ``root`` to its fixpoint.

        Args:
            root: Tree to simplify; left untouched

        Returns:
            The simplified tree and the ordered list of applied steps
        """
        logger = get_logger()
        logger.debug(f"Starting simplification of {root}")

        current = root
        steps: List[SimplificationStep] = []

        for _ in range(self.max_iterations):
            rewritten = self._apply_first_rule(current)
            if rewritten is None:
                logger.debug(f"Simplification reached fixpoint after {len(steps)} steps")
                return current, steps

            rule, result = rewritten
            step = SimplificationStep(rule.name, str(current), str(result))
            logger.rule_applied(step.rule, step.before, step.after)
            steps.append(step)
            current = result

        logger.warning(
            f"Simplification stopped after {self.max_iterations} rewrites "
            f"without reaching a fixpoint: {current}"
        )
        return current, steps

    def _apply_first_rule(self, root: ast.Expr) -> Optional[Tuple[Rule, ast.Expr]]:
        """Apply the highest priority rule that matches anywhere in the tree."""
        for rule in self.rules:
            result = _rewrite_first(root, rule)
            if result is not None:
                return rule, result
        return None


def _rewrite_first(node: ast.Expr, rule: Rule) -> Optional[ast.Expr]:
    """Rewrite the first matching node in pre-order, rebuilding its ancestors.

    Returns:
        New tree, or None if ``rule`` matches nowhere under ``node``
    """
    result = rule.apply(node)
    if result is not None:
        return result

    if isinstance(node, ast.Not):
        operand = _rewrite_first(node.operand, rule)
        return None if operand is None else replace(node, operand=operand)

    if isinstance(node, (ast.And, ast.Or, ast.Implies)):
        left = _rewrite_first(node.left, rule)
        if left is not None:
            return replace(node, left=left)
        right = _rewrite_first(node.right, rule)
        if right is not None:
            return replace(node, right=right)

    return None


def simplify(
    root: ast.Expr, enabled: bool = True, max_iterations: int = MAX_ITERATIONS
) -> Tuple[ast.Expr, List[SimplificationStep]]:
    """Simplify an expression tree.

    Args:
        root: Parsed expression
        enabled: When False the tree is returned as is with no steps
        max_iterations: Rewrite cap for this call

    Returns:
        Tuple of (simplified tree, applied steps in order)
    """
    if not enabled:
        return root, []
    return Simplifier(max_iterations=max_iterations).simplify(root)
