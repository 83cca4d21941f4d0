# core/results.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Result envelopes returned by the engine entry points

"""Structured results of engine calls.

A call returns exactly one of these. ``ErrorResult`` never carries a
partial simplification or table.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from logic.simplifier import SimplificationStep
from logic.truth_table import TruthTable
from parser.ast_nodes import Expr
from parser.exceptions import ErrorKind


@dataclass(frozen=True)
class ErrorResult:
    """Rejected expression.

    Attributes:
        kind: Error category
        message: Human readable description in the configured language
    """

    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"errorKind": str(self.kind), "message": self.message}


@dataclass(frozen=True)
class SimplifyResult:
    """Simplified expression and the rewrites that produced it.

    Attributes:
        before: Expression text as supplied by the caller
        after: String form of the simplified tree
        operations: Applied rewrite steps in order
        expression: The simplified tree
    """

    before: str
    after: str
    operations: Tuple[SimplificationStep, ...]
    expression: Expr

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "before": self.before,
            "after": self.after,
            "operations": [step.to_dict() for step in self.operations],
        }


@dataclass(frozen=True)
class SimplifyTableResult(SimplifyResult):
    """Simplified expression together with its truth table.

    Attributes:
        table: Truth table of the simplified tree
    """

    table: Optional[TruthTable] = None

    @property
    def header(self) -> List[str]:
        return self.table.header

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["header"] = self.header
        result["table"] = self.table.to_dict()
        return result


@dataclass(frozen=True)
class TableResult:
    """Truth table of an expression, without simplification.

    Attributes:
        expression: String form of the parsed tree
        table: Truth table of the tree
    """

    expression: str
    table: TruthTable

    @property
    def ok(self) -> bool:
        return True

    @property
    def header(self) -> List[str]:
        return self.table.header

    def to_dict(self) -> Dict[str, Any]:
        return {
            "expression": self.expression,
            "header": self.header,
            "table": self.table.to_dict(),
        }
