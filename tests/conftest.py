# tests/conftest.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

The configuration handles:
- Python path setup for module imports
- Test environment verification
- Common formula fixtures
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before running any test.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import truthtable
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the log handler before any test captures stdout
    utils.get_logger()

    yield


@pytest.fixture
def conditional_formula():
    """Two-variable formula whose table has exactly one False row."""
    return "A -> B"


@pytest.fixture
def complex_formula():
    """Formula mixing every connective and a parenthesized group."""
    return "-(A v B) <-> (-A ^ -B) -> C"
