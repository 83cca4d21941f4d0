# core/__init__.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Core module public API for the expression engine

"""Engine entry points, configuration and result types.

Three operations are offered, all pure and stateless:

    simplify: validate and simplify an expression
    simplify_and_table: validate, simplify and tabulate the result
    table: validate and tabulate an expression without simplifying it

Every operation returns a result object with ``ok`` and ``to_dict()``,
or an ``ErrorResult`` naming the error kind and a message in the
configured language.

Example:
    >>> from core import simplify_and_table, EngineConfig
    >>> result = simplify_and_table("A⋀B", EngineConfig(case_sensitive=True))
    >>> result.header
    ['A', 'B', 'A⋀B']
"""

from .config import EngineConfig, Language
from .engine import simplify, simplify_and_table, table
from .results import ErrorResult, SimplifyResult, SimplifyTableResult, TableResult

__all__ = [
    "EngineConfig",
    "Language",
    "simplify",
    "simplify_and_table",
    "table",
    "ErrorResult",
    "SimplifyResult",
    "SimplifyTableResult",
    "TableResult",
]

__version__ = "1.0.0"
