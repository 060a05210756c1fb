"""
Test configuration for humanbytes.
"""

import os
import tempfile

import pytest
from click.testing import CliRunner

import humanbytes
from humanbytes.core.converter import ByteConverter


@pytest.fixture
def temp_workspace():
    """Create a temporary workspace for testing."""
    old_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as temp_dir:
        os.chdir(temp_dir)
        yield temp_dir
        os.chdir(old_cwd)


@pytest.fixture
def converter() -> ByteConverter:
    """A converter with empty dynamic caches."""
    return ByteConverter()


@pytest.fixture
def uncached() -> ByteConverter:
    """A converter whose dynamic caches never store anything."""
    return ByteConverter(max_entries=0)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_shared_caches():
    """Keep the module-level converter's caches from leaking between tests."""
    yield
    humanbytes.clear_caches()
