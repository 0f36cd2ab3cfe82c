"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides isolated environments and fresh env readers for all tests
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from typed_env import EnvReader, set_default_reader

TEST_KEYS = [
    "BOOL_KEY",
    "DURATION_KEY",
    "FLOAT64_KEY",
    "INT64_KEY",
    "INT_KEY",
    "STRING_KEY",
    "UINT64_KEY",
    "UINT_KEY",
    "TYPED_ENV_FILE",
]


@pytest.fixture(autouse=True)
def clean_env():
    """Remove test variables from the environment and restore it afterwards."""
    with patch.dict(os.environ, {}, clear=False):
        for key in TEST_KEYS:
            os.environ.pop(key, None)
        yield


@pytest.fixture(autouse=True)
def fresh_default_reader():
    """Give each test its own process-wide reader with an empty error log."""
    reader = EnvReader()
    previous = set_default_reader(reader)
    yield reader
    set_default_reader(previous)


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def env_file(temp_dir):
    """Provide a dotenv file with a mix of valid and invalid values."""
    path = temp_dir / ".env"
    path.write_text("INT_KEY=42\nBOOL_KEY=maybe\nSTRING_KEY=from-file\n")
    return path
