# Path: checktree/tests/conftest.py
"""Shared pytest fixtures for checktree tests."""

import pytest

from checktree.core.config_loader import ConfigLoader
from checktree.core.context import get_default_context
from checktree.engine import convert_data_to_entities
from checktree.tests.fixtures import create_sample_tree, create_forest


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Fresh config singleton and deprecation latch for every test."""
    for name in (
        'CHECKTREE_SHOW_CHECKED_STRATEGY',
        'CHECKTREE_DUPLICATE_KEY_POLICY',
        'CHECKTREE_LABEL_PROP',
        'CHECKTREE_LOG_LEVEL',
        'CHECKTREE_LOG_DIR',
        'CHECKTREE_DEBUG',
        'CHECKTREE_CONSOLE_LOGGING',
    ):
        monkeypatch.delenv(name, raising=False)
    ConfigLoader.reset()
    get_default_context().reset()
    yield
    ConfigLoader.reset()
    get_default_context().reset()


@pytest.fixture
def sample_index():
    return convert_data_to_entities(create_sample_tree())


@pytest.fixture
def forest_index():
    return convert_data_to_entities(create_forest())
