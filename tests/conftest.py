# tests/conftest.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Veritas test suite.

The configuration handles:
- Python path setup for module imports
- Test environment verification
- Common fixtures for engine configuration and assignment enumeration
"""

import sys
from itertools import product
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def strict_config():
    """Engine configuration that keeps variable case as typed.

    Returns:
        EngineConfig: Default options with case sensitivity enabled
    """
    from core import EngineConfig

    return EngineConfig(case_sensitive=True)


def all_assignments(names):
    """Enumerate every truth assignment of ``names`` as dictionaries."""
    for bits in product((False, True), repeat=len(names)):
        yield dict(zip(names, bits))


@pytest.fixture
def assignments():
    """Provide the assignment enumerator to tests.

    Returns:
        Callable yielding every assignment for a sequence of variable names
    """
    return all_assignments
