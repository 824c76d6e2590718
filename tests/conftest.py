"""Shared pytest fixtures."""

import logging
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def notes_dir() -> Path:
    return FIXTURES / "notes"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they don't outlive a test's streams."""
    yield
    logger = logging.getLogger("context_cli")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
