"""
Pytest configuration and shared fixtures.

Registers the integration marker and command-line option, and builds test
clients around an injected inference backend so no test touches the network.
"""

import pytest
from fastapi.testclient import TestClient

from docscan.api.main import create_app
from docscan.core.config import Settings
from docscan.services.inference_base import InferenceBackend


def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against the real Gemini API"
    )


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test requiring a real GOOGLE_API_KEY"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified"""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def test_settings(tmp_path):
    # Point the static dir somewhere empty and ignore any local .env
    return Settings(
        _env_file=None,
        google_api_key="test-key",
        gemini_base_url="https://gemini.test/v1beta",
        static_dir=str(tmp_path / "no-public"),
    )


@pytest.fixture
def make_client(test_settings):
    def _make(backend: InferenceBackend, settings: Settings | None = None) -> TestClient:
        return TestClient(create_app(settings or test_settings, backend=backend))
    return _make
