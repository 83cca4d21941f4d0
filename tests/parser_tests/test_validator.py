# tests/parser_tests/test_validator.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Test suite for expression validation and error classification

"""Test suite for the validator.

Covers character legality, token order, parenthesis balance and the size
bound, and checks that each violation is reported with the right kind.
"""

import pytest
from parser import validate, ErrorKind, ValidationError
from parser.validator import MAX_OPERANDS, MAX_OPERATORS, MAX_VARIABLES
from utils.logger import get_logger


class TestValidator:
    """Test cases for validation outcomes."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    LEGAL_EXPRESSIONS = [
        "A",
        "Hello",
        "Å",
        "Hello ⋀ World",
        "¬A",
        "¬¬A",
        "A⋀B⋁C➔D",
        "(A⋀B)⋁(B⋀C)",
        "¬(A⋁B)",
        "((A))",
        "A➔B➔C",
        "true⋀False",
        " A \t⋀\n B ",
    ]

    @pytest.mark.parametrize("expression", LEGAL_EXPRESSIONS)
    def test_legal_expressions(self, expression):
        assert validate(expression) is None

    INVALID_CHARACTER_CASES = [
        "#",
        "[",
        "⋁",
        "A B",
        "A⋁⋀",
        "A(",
        "A[",
        "A⋀()",
        "A¬B",
        "(A⋀B)(B⋀C)",
        "Hello World",
        "TEst a",
        "A⋀",
        "¬",
        ")",
        "A1",
        "A_B",
        "A & B",
    ]

    @pytest.mark.parametrize("expression", INVALID_CHARACTER_CASES)
    def test_invalid_character(self, expression):
        error = validate(expression)
        assert isinstance(error, ValidationError)
        assert error.kind is ErrorKind.INVALID_CHARACTER

    MISSING_CHARACTER_CASES = ["", "   ", "(A", "A⋀(B", "A)", "(A⋀B))", "((A)", "("]

    @pytest.mark.parametrize("expression", MISSING_CHARACTER_CASES)
    def test_missing_character(self, expression):
        error = validate(expression)
        assert error is not None
        assert error.kind is ErrorKind.MISSING_CHARACTER

    def test_reports_offending_character_and_position(self):
        assert validate("A#B") == ValidationError(
            ErrorKind.INVALID_CHARACTER, position=1, character="#"
        )
        assert validate("A⋀⋁B") == ValidationError(
            ErrorKind.INVALID_CHARACTER, position=2, character="⋁"
        )

    def test_reports_missing_closing_parenthesis(self):
        error = validate("A⋀(B")
        assert error.character == ")"
        assert error.position == len("A⋀(B")

    def test_reports_unmatched_closing_parenthesis(self):
        error = validate("A)")
        assert error.character == "("
        assert error.position == 1

    def test_illegal_character_wins_over_structure(self):
        """Character legality is checked before token order."""
        error = validate("(A B #")
        assert error.kind is ErrorKind.INVALID_CHARACTER
        assert error.character == "#"

    def test_sixteen_variables_are_too_big(self):
        error = validate("A⋀B⋀C⋀D⋀E⋀F⋀G⋀H⋀I⋀J⋀K⋀L⋀M⋀N⋀O⋀P")
        assert error.kind is ErrorKind.TOO_BIG_EXPRESSION
        assert error.count == 16
        assert error.limit == MAX_VARIABLES

    def test_ten_variables_are_accepted(self):
        assert validate("A⋀B⋀C⋀D⋀E⋀F⋀G⋀H⋀I⋀J") is None

    def test_variable_cap_boundary(self):
        names = [chr(ord("A") + i) for i in range(MAX_VARIABLES + 1)]
        assert validate("⋀".join(names[:-1])) is None
        assert validate("⋀".join(names)).kind is ErrorKind.TOO_BIG_EXPRESSION

    def test_repeated_variables_count_once(self):
        assert validate("⋁".join(["A", "B"] * 10)) is None

    def test_operand_cap_boundary(self):
        assert validate("⋀".join(["A"] * MAX_OPERANDS)) is None
        error = validate("⋀".join(["A"] * (MAX_OPERANDS + 1)))
        assert error.kind is ErrorKind.TOO_BIG_EXPRESSION
        assert error.count == MAX_OPERANDS + 1

    def test_operator_cap_boundary(self):
        assert validate("¬" * MAX_OPERATORS + "A") is None
        error = validate("¬" * (MAX_OPERATORS + 1) + "A")
        assert error.kind is ErrorKind.TOO_BIG_EXPRESSION
        assert error.count == MAX_OPERATORS + 1
        assert error.limit == MAX_OPERATORS

    def test_custom_limits(self):
        assert validate("A⋀B⋀C", max_variables=2).kind is ErrorKind.TOO_BIG_EXPRESSION
        assert validate("A⋀A⋀A", max_operands=2).kind is ErrorKind.TOO_BIG_EXPRESSION

    @pytest.mark.parametrize("expression", ["A⋀B", "", "A B", "(A", "A#"])
    def test_validation_is_deterministic(self, expression):
        assert validate(expression) == validate(expression)
