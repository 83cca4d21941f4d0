# core/config.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Immutable per-call engine configuration

"""Engine configuration passed explicitly to every pipeline entry point.

Nothing in the engine reads global settings: each call receives an
``EngineConfig`` and threads the relevant fields through the stages.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from logic.simplifier import MAX_ITERATIONS
from logic.truth_table import HideMode, SortMode
from parser import MAX_DEPTH
from parser.validator import MAX_OPERANDS, MAX_OPERATORS, MAX_VARIABLES


class Language(Enum):
    """Language of error messages."""

    ENGLISH = "en"
    NORWEGIAN_BOKMAAL = "nb"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "Language":
        """Resolve a language tag such as ``en-US`` or ``nb``.

        English tags map to English; Norwegian tags and anything
        unrecognized map to Norwegian Bokmål.
        """
        if tag and tag.strip()[:2].lower() == "en":
            return cls.ENGLISH
        return cls.NORWEGIAN_BOKMAAL


@dataclass(frozen=True)
class EngineConfig:
    """Options for a single engine call.

    Attributes:
        simplify: Apply the rewrite rules
        case_sensitive: Keep variable case instead of lower-casing the input
        sort: Row ordering of generated tables
        hide: Rows to drop from generated tables
        hide_intermediate: Tabulate only variables and the whole expression
        language: Language of error messages
        max_variables: Distinct variable cap enforced by the validator
        max_operands: Operand occurrence cap enforced by the validator
        max_operators: Operator occurrence cap enforced by the validator
        max_depth: Tree depth ceiling enforced by the parser
        max_iterations: Rewrite cap enforced by the simplifier
    """

    simplify: bool = True
    case_sensitive: bool = False
    sort: SortMode = SortMode.DEFAULT
    hide: HideMode = HideMode.NONE
    hide_intermediate: bool = False
    language: Language = Language.ENGLISH
    max_variables: int = MAX_VARIABLES
    max_operands: int = MAX_OPERANDS
    max_operators: int = MAX_OPERATORS
    max_depth: int = MAX_DEPTH
    max_iterations: int = MAX_ITERATIONS

    def __post_init__(self):
        # Every operator adds at most one level, so the deepest validated
        # tree has max_operators + 1 levels
        if self.max_operators >= self.max_depth:
            raise ValueError(
                f"max_operators ({self.max_operators}) must be below "
                f"max_depth ({self.max_depth})"
            )
