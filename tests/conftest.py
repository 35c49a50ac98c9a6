"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
