# tests/parser_tests/test_normalizer.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Test suite for operator alias normalization

"""Test suite for the normalizer.

Checks that every alias maps to its canonical symbol, that word aliases only
match whole words, and that case folding follows the case sensitivity flag.
"""

import pytest
from parser import normalize, normalize_with_offsets
from parser.normalizer import ALIASES


class TestNormalizer:
    """Test cases for alias rewriting and case handling."""

    # (input, expected output) with case sensitivity on
    ALIAS_CASES = [
        ("A and B", "A ⋀ B"),
        ("A AND B", "A ⋀ B"),
        ("A And B", "A ⋀ B"),
        ("A & B", "A ⋀ B"),
        ("A && B", "A ⋀ B"),
        ("A ∧ B", "A ⋀ B"),
        ("A or B", "A ⋁ B"),
        ("A|B", "A⋁B"),
        ("A||B", "A⋁B"),
        ("A ∨ B", "A ⋁ B"),
        ("not A", "¬ A"),
        ("!A", "¬A"),
        ("~A", "¬A"),
        ("A implies B", "A ➔ B"),
        ("A -> B", "A ➔ B"),
        ("A => B", "A ➔ B"),
        ("A → B", "A ➔ B"),
        ("A ⇒ B", "A ➔ B"),
        ("A && !B || C -> D", "A ⋀ ¬B ⋁ C ➔ D"),
    ]

    @pytest.mark.parametrize("text, expected", ALIAS_CASES)
    def test_aliases_become_canonical_symbols(self, text, expected):
        assert normalize(text, case_sensitive=True) == expected

    def test_canonical_symbols_pass_through(self):
        assert normalize("A⋀¬B⋁C➔D", case_sensitive=True) == "A⋀¬B⋁C➔D"

    def test_word_aliases_only_match_whole_words(self):
        """'and' inside 'Sandy' and 'Andy' is part of a variable name."""
        assert normalize("Sandy or Andy", case_sensitive=True) == "Sandy ⋁ Andy"
        assert normalize("notA", case_sensitive=True) == "notA"
        assert normalize("Ordnung", case_sensitive=True) == "Ordnung"

    def test_lowercases_when_case_insensitive(self):
        assert normalize("Hello AND World") == "hello ⋀ world"
        assert normalize("A⋀B", case_sensitive=False) == "a⋀b"

    def test_keeps_case_when_case_sensitive(self):
        assert normalize("Hello⋀World", case_sensitive=True) == "Hello⋀World"

    def test_illegal_characters_pass_through(self):
        assert normalize("A#B[", case_sensitive=True) == "A#B["
        assert normalize("", case_sensitive=True) == ""

    def test_lowercasing_keeps_text_length(self):
        """'İ' lower-cases to two characters, so it is kept as typed."""
        assert normalize("İ and B") == "İ ⋀ b"
        assert normalize("ÄÖÅ") == "äöå"

    def test_offsets_point_into_raw_text(self):
        normalized, offsets = normalize_with_offsets("A and B && #")
        assert normalized == "a ⋀ b ⋀ #"
        assert len(offsets) == len(normalized) + 1
        assert offsets[normalized.index("#")] == 11
        assert offsets[-1] == len("A and B && #")

    def test_offsets_without_aliases_are_identity(self):
        normalized, offsets = normalize_with_offsets("A⋀B", case_sensitive=True)
        assert normalized == "A⋀B"
        assert offsets == [0, 1, 2, 3]

    def test_offsets_of_empty_text(self):
        assert normalize_with_offsets("") == ("", [0])

    def test_alias_table_covers_every_operator(self):
        assert set(ALIASES) == {"¬", "⋀", "⋁", "➔"}
        for symbol, spellings in ALIASES.items():
            for alias in spellings:
                assert normalize(alias, case_sensitive=True) == symbol
