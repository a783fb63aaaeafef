"""Shared fixtures."""

import pytest

from schedboard.database import MasterDatabase


@pytest.fixture
def db(tmp_path):
    """A fresh database in a temporary directory."""
    return MasterDatabase(tmp_path / "schedboard.db")
