import sys
import os
import pytest
# Ensure the project root is on sys.path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from use_tree_loader import use_tree_names_from_source


@pytest.fixture
def names_from():
    """Flatten a `use` declaration given as source text."""
    return use_tree_names_from_source
