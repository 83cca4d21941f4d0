# tests/logic_tests/test_truth_table.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Test suite for truth table construction

"""Test suite for truth table generation, column decomposition, sorting and hiding."""

import pytest
from parser import parse
from parser.ast_nodes import Variable, subexpressions, variables
from logic import HideMode, SortMode, build_table, evaluate

T, F = True, False


class TestColumnDecomposition:
    """Test cases for splitting a tree into table columns."""

    def test_variables_in_first_appearance_order(self):
        assert variables(parse("B⋀A⋁B⋀C")) == ("B", "A", "C")
        assert variables(parse("A"), parse("C⋁B")) == ("A", "C", "B")
        assert variables(parse("True")) == ()

    def test_leaves_then_intermediates_then_result(self):
        columns = subexpressions(parse("¬A⋀B"))
        assert [str(c) for c in columns] == ["A", "B", "¬A", "¬A⋀B"]

    def test_hide_intermediate_keeps_leaves_and_result(self):
        columns = subexpressions(parse("¬A⋀(B⋁C)"), hide_intermediate=True)
        assert [str(c) for c in columns] == ["A", "B", "C", "¬A⋀(B⋁C)"]

    def test_duplicate_subexpressions_appear_once(self):
        columns = subexpressions(parse("(A⋀B)⋁(A⋀B)"))
        assert [str(c) for c in columns] == ["A", "B", "A⋀B", "A⋀B⋁A⋀B"]

    def test_single_variable(self):
        assert subexpressions(parse("A")) == (Variable("A"),)


class TestTruthTable:
    """Test cases for building tables."""

    def test_conjunction_table(self):
        table = build_table(subexpressions(parse("A⋀B")))

        assert table.variables == ("A", "B")
        assert table.header == ["A", "B", "A⋀B"]
        assert table.matrix == [
            [F, F, F],
            [F, T, F],
            [T, F, F],
            [T, T, T],
        ]

    def test_first_variable_is_most_significant(self):
        table = build_table([parse("A⋀B")])
        assert [row.assignment for row in table.rows] == [
            {"A": F, "B": F},
            {"A": F, "B": T},
            {"A": T, "B": F},
            {"A": T, "B": T},
        ]

    def test_implication_semantics(self):
        table = build_table([parse("A➔B")])
        assert [row.result for row in table.rows] == [T, T, F, T]

    @pytest.mark.parametrize(
        "expression, variable_count",
        [("True", 0), ("A", 1), ("A⋁B", 2), ("A⋀B➔C", 3), ("(A➔B)⋀(C⋁¬D)", 4)],
    )
    def test_row_count_is_power_of_two(self, expression, variable_count):
        table = build_table(subexpressions(parse(expression)))
        assert len(table.variables) == variable_count
        assert len(table.rows) == 2 ** variable_count

    def test_values_match_evaluation(self):
        columns = subexpressions(parse("¬(A⋀B)⋁C"))
        table = build_table(columns)
        for row in table.rows:
            assert row.values == tuple(evaluate(c, row.assignment) for c in columns)

    def test_constant_expression(self):
        table = build_table(subexpressions(parse("False")))
        assert table.header == ["False"]
        assert table.matrix == [[F]]

    def test_no_expressions(self):
        table = build_table([])
        assert table.variables == ()
        assert table.matrix == [[]]

    def test_serialization(self):
        table = build_table(subexpressions(parse("¬A")))
        assert table.to_dict() == {
            "variables": ["A"],
            "header": ["A", "¬A"],
            "rows": [[F, T], [T, F]],
        }

    def test_text_rendering(self):
        table = build_table(subexpressions(parse("A⋁B")))
        assert str(table).splitlines() == [
            "A | B | A⋁B",
            "F | F | F",
            "F | T | T",
            "T | F | T",
            "T | T | T",
        ]


class TestSortAndHide:
    """Test cases for row ordering and hiding."""

    def test_true_first(self):
        table = build_table(subexpressions(parse("A⋀B")), sort=SortMode.TRUE_FIRST)
        assert table.matrix == [
            [T, T, T],
            [F, F, F],
            [F, T, F],
            [T, F, F],
        ]

    def test_false_first(self):
        table = build_table(subexpressions(parse("A⋁B")), sort=SortMode.FALSE_FIRST)
        assert table.matrix == [
            [F, F, F],
            [F, T, T],
            [T, F, T],
            [T, T, T],
        ]

    def test_hide_true_rows(self):
        table = build_table(subexpressions(parse("A⋀B")), hide=HideMode.TRUE)
        assert len(table.rows) == 3
        assert not any(row.result for row in table.rows)

    def test_hide_false_rows(self):
        table = build_table(subexpressions(parse("A⋀B")), hide=HideMode.FALSE)
        assert table.matrix == [[T, T, T]]

    def test_sorting_keeps_row_content(self):
        columns = subexpressions(parse("A➔B⋁C"))
        default = build_table(columns)
        sorted_table = build_table(columns, sort=SortMode.FALSE_FIRST)
        assert sorted(map(tuple, default.matrix)) == sorted(map(tuple, sorted_table.matrix))
