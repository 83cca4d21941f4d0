# logic/truth_table.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Truth table construction, row sorting and row hiding

"""Truth table generation for one or more expression columns.

Rows enumerate every assignment of the variables in binary counting order,
starting from all-false, with the first variable as the most significant
bit. For ``A⋀B`` the rows are FF, FT, TF, TT.

The final column is treated as the result: sorting and hiding look at it
only, and never change the content of a row.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Any, Dict, List, Sequence, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger
from .evaluator import Evaluator


class SortMode(Enum):
    """Row ordering of a truth table."""

    DEFAULT = "DEFAULT"
    TRUE_FIRST = "TRUE_FIRST"
    FALSE_FIRST = "FALSE_FIRST"

    def __str__(self) -> str:
        return self.name


class HideMode(Enum):
    """Rows dropped from a truth table, by value of the final column."""

    NONE = "NONE"
    TRUE = "TRUE"
    FALSE = "FALSE"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Row:
    """One assignment and the value of every column under it.

    Attributes:
        assignment: Variable name to truth value
        values: One value per table column
    """

    assignment: Dict[str, bool]
    values: Tuple[bool, ...]

    @property
    def result(self) -> bool:
        return self.values[-1]


@dataclass(frozen=True)
class TruthTable:
    """Truth values of a set of expressions over all assignments.

    Attributes:
        variables: Distinct variable names in first-appearance order
        columns: Tabulated expressions, in header order
        rows: Table rows after sorting and hiding
    """

    variables: Tuple[str, ...]
    columns: Tuple[ast.Expr, ...]
    rows: Tuple[Row, ...]

    @property
    def header(self) -> List[str]:
        return [str(column) for column in self.columns]

    @property
    def matrix(self) -> List[List[bool]]:
        return [list(row.values) for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variables": list(self.variables),
            "header": self.header,
            "rows": self.matrix,
        }

    def __str__(self) -> str:
        lines = [" | ".join(self.header)]
        for row in self.rows:
            lines.append(" | ".join("T" if value else "F" for value in row.values))
        return "\n".join(lines)


def build_table(
    expressions: Sequence[ast.Expr],
    hide: HideMode = HideMode.NONE,
    sort: SortMode = SortMode.DEFAULT,
) -> TruthTable:
    """Tabulate ``expressions`` over every assignment of their variables.

    Args:
        expressions: Columns of the table; the last one is the result column
        hide: Rows to drop by result value
        sort: Row ordering by result value

    Returns:
        TruthTable with ``2**n`` rows for ``n`` variables before hiding
    """
    logger = get_logger()

    columns = tuple(expressions)
    names = ast.variables(*columns)
    logger.debug(f"Building truth table over variables {list(names)}")

    rows = []
    for bits in product((False, True), repeat=len(names)):
        assignment = dict(zip(names, bits))
        evaluator = Evaluator(assignment)
        values = tuple(evaluator.evaluate(column) for column in columns)
        rows.append(Row(assignment, values))

    if columns:
        rows = _hide_rows(rows, hide)
        rows = _sort_rows(rows, sort)

    logger.table_built(len(rows), len(columns))
    return TruthTable(names, columns, tuple(rows))


def _hide_rows(rows: List[Row], hide: HideMode) -> List[Row]:
    if hide is HideMode.TRUE:
        return [row for row in rows if not row.result]
    if hide is HideMode.FALSE:
        return [row for row in rows if row.result]
    return rows


def _sort_rows(rows: List[Row], sort: SortMode) -> List[Row]:
    # sorted() is stable, so counting order survives within each group
    if sort is SortMode.TRUE_FIRST:
        return sorted(rows, key=lambda row: not row.result)
    if sort is SortMode.FALSE_FIRST:
        return sorted(rows, key=lambda row: row.result)
    return rows
