# tests/conftest.py

"""Shared pytest fixtures for all shopsearch tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from shopsearch.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path) -> Generator[None, None, None]:
    """Keep logs in a temp dir and never pick up a real API key."""
    with patch.object(Settings, "LOGS_DIR", tmp_path / "logs"), patch.object(
        Settings, "ZENSERP_API_KEY", "test-key"
    ):
        yield
