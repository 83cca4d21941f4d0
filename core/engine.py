# core/engine.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Pipeline entry points: normalize, validate, parse, simplify, tabulate

"""Engine entry points tying the pipeline stages together.

Each entry point takes raw text and an ``EngineConfig`` and returns either
a result object or an ``ErrorResult``. Stages run strictly in order:

    normalize -> validate -> parse -> simplify -> build table

A validation failure ends the call before parsing. No state is kept
between calls, so the functions are safe to call from any number of
threads at once.

Example:
    >>> from core.engine import simplify
    >>> from core.config import EngineConfig
    >>> result = simplify("A and not A", EngineConfig(case_sensitive=True))
    >>> result.after
    'False'
"""

import dataclasses
import time
from typing import Optional, Union

from logic.simplifier import simplify as simplify_tree
from logic.truth_table import build_table
from parser import normalize_with_offsets, parse, validate
from parser.ast_nodes import Expr, subexpressions
from utils.logger import get_logger
from .config import EngineConfig
from .messages import render
from .results import ErrorResult, SimplifyResult, SimplifyTableResult, TableResult


def _prepare(text: str, config: EngineConfig) -> Union[Expr, ErrorResult]:
    """Normalize, validate and parse ``text``.

    Returns:
        The parsed tree, or an ErrorResult if validation failed
    """
    logger = get_logger()

    normalized, offsets = normalize_with_offsets(text, config.case_sensitive)
    error = validate(
        normalized, config.max_variables, config.max_operands, config.max_operators
    )
    if error is not None:
        if error.position is not None:
            # Report the column of the text as typed, not as normalized
            error = dataclasses.replace(error, position=offsets[error.position])
        message = render(error, config.language)
        logger.warning(f"Expression is not legal: {message}")
        return ErrorResult(error.kind, message)

    return parse(normalized, config.max_depth)


def simplify(text: str, config: Optional[EngineConfig] = None):
    """Validate and simplify an expression.

    Args:
        text: Expression as typed by the user
        config: Call options, defaults to ``EngineConfig()``

    Returns:
        SimplifyResult, or ErrorResult for an illegal expression
    """
    config = config or EngineConfig()
    logger = get_logger()
    logger.expression_received(
        "Simplify",
        text,
        simplify=config.simplify,
        caseSensitive=config.case_sensitive,
        lang=config.language,
    )

    start = time.perf_counter()
    tree = _prepare(text, config)
    if isinstance(tree, ErrorResult):
        return tree

    simplified, steps = simplify_tree(tree, config.simplify, config.max_iterations)
    logger.final_result(str(simplified), (time.perf_counter() - start) * 1000)

    return SimplifyResult(text, str(simplified), tuple(steps), simplified)


def simplify_and_table(text: str, config: Optional[EngineConfig] = None):
    """Validate and simplify an expression, then tabulate the result.

    Args:
        text: Expression as typed by the user
        config: Call options, defaults to ``EngineConfig()``

    Returns:
        SimplifyTableResult, or ErrorResult for an illegal expression
    """
    config = config or EngineConfig()
    logger = get_logger()
    logger.expression_received(
        "Simplify and table",
        text,
        simplify=config.simplify,
        caseSensitive=config.case_sensitive,
        sort=config.sort,
        hide=config.hide,
        hideIntermediate=config.hide_intermediate,
        lang=config.language,
    )

    start = time.perf_counter()
    tree = _prepare(text, config)
    if isinstance(tree, ErrorResult):
        return tree

    simplified, steps = simplify_tree(tree, config.simplify, config.max_iterations)
    truth_table = build_table(
        subexpressions(simplified, config.hide_intermediate),
        hide=config.hide,
        sort=config.sort,
    )
    logger.final_result(str(simplified), (time.perf_counter() - start) * 1000)

    return SimplifyTableResult(text, str(simplified), tuple(steps), simplified, truth_table)


def table(text: str, config: Optional[EngineConfig] = None):
    """Validate an expression and tabulate it as written.

    The ``simplify`` option is ignored: the table always describes the
    parsed, unsimplified tree.

    Args:
        text: Expression as typed by the user
        config: Call options, defaults to ``EngineConfig()``

    Returns:
        TableResult, or ErrorResult for an illegal expression
    """
    config = config or EngineConfig()
    logger = get_logger()
    logger.expression_received(
        "Table",
        text,
        sort=config.sort,
        hide=config.hide,
        hideIntermediate=config.hide_intermediate,
        lang=config.language,
    )

    tree = _prepare(text, config)
    if isinstance(tree, ErrorResult):
        return tree

    truth_table = build_table(
        subexpressions(tree, config.hide_intermediate),
        hide=config.hide,
        sort=config.sort,
    )
    logger.debug(f"New table created:\n{truth_table}")

    return TableResult(str(tree), truth_table)
