"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from osrs_mcp.config.settings import Settings
from osrs_mcp.container import DependencyContainer

OBJTYPES_LINES = [
    "100 Dragon scimitar",
    "101 Dragon longsword",
    "200 Iron dagger",
]


@pytest.fixture
def data_directory():
    """
    Create a temporary data directory with a few data files.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "objtypes.txt"), "w", encoding="utf-8") as f:
            f.write("\n".join(OBJTYPES_LINES) + "\n")

        with open(os.path.join(temp_dir, "npctypes.txt"), "w", encoding="utf-8") as f:
            f.write("0 hans\n1 man\n2 woman\n3 man_in_black\n")

        # Windows line endings
        with open(os.path.join(temp_dir, "varptypes.txt"), "wb") as f:
            f.write(b"10 quest_points\r\n11 cooks_assistant\r\n12 quest_list\r\n")

        with open(os.path.join(temp_dir, "notes.md"), "w", encoding="utf-8") as f:
            f.write("# not a data file\n")

        yield temp_dir


@pytest.fixture
def objtypes_path(data_directory):
    return os.path.join(data_directory, "objtypes.txt")


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def test_settings(data_directory, monkeypatch):
    """Settings pointing at the temporary data directory."""
    monkeypatch.setenv("OSRS_DATA_DIR", data_directory)
    monkeypatch.setenv("OSRS_WIKI_API_URL", "https://wiki.invalid/api.php")
    return Settings()


@pytest.fixture
def dependency_container(test_settings, mock_logger):
    """
    Create a dependency container wired to the temporary data directory.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(test_settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
