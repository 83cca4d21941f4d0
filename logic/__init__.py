# logic/__init__.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Simplification and truth table components

"""Back half of the expression pipeline: AST in, simplified tree and table out.

Primary Components:
    simplify: Fixpoint rewriting with the ordered rule catalog
    SimplificationStep: Record of one applied rule
    build_table: Truth table over every variable assignment
    evaluate: Truth value of a tree for one assignment

Example:
    >>> from parser import parse
    >>> from logic import simplify
    >>> tree, steps = simplify(parse("¬¬A"))
    >>> str(tree), [step.rule for step in steps]
    ('A', ['Double negation'])
"""

from .evaluator import Evaluator, evaluate
from .rules import RULES, Rule
from .simplifier import SimplificationStep, Simplifier, simplify
from .truth_table import HideMode, Row, SortMode, TruthTable, build_table

__all__ = [
    "Evaluator",
    "evaluate",
    "RULES",
    "Rule",
    "SimplificationStep",
    "Simplifier",
    "simplify",
    "HideMode",
    "Row",
    "SortMode",
    "TruthTable",
    "build_table",
]
