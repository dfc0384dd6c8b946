"""
Root pytest configuration and fixtures for the vtcore test suite.
"""

import os
from pathlib import Path
import sys

import pytest
import responses

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.utils.factories import BASE  # noqa: E402
from vtcore._http import HTTPClient  # noqa: E402


@pytest.fixture
def api_key():
    """Test API key."""
    return "test-api-key-12345"


@pytest.fixture
def http(api_key):
    return HTTPClient(api_key=api_key, base_url=BASE, timeout=5)


@pytest.fixture
def tmp_sample(tmp_path):
    """A small file to upload."""
    path = tmp_path / "sample.txt"
    path.write_bytes(b"123\n")
    return path


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean VT_ environment variables before each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("VT_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_requests():
    """Mock HTTP requests using responses library."""
    with responses.RequestsMock() as rsps:
        yield rsps
