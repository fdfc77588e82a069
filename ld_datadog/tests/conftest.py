"""Shared fixtures for the webhook relay tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ld_datadog.api.app import create_application
from ld_datadog.config.settings import AuthConfig, get_auth_config
from ld_datadog.web.datadog import PublishResult
from ld_datadog.utils.signature import compute_signature

DATA_DIR = Path(__file__).parent / "data"

@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Forget credentials cached by earlier tests."""
    get_auth_config.cache_clear()
    yield
    get_auth_config.cache_clear()

@pytest.fixture
def payload() -> bytes:
    """The sample environment change from the LaunchDarkly docs."""
    return (DATA_DIR / "payload.json").read_bytes()

@pytest.fixture
def flag_payload() -> bytes:
    return (DATA_DIR / "flag_payload.json").read_bytes()

@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig(secret="secret", api_key="dd-api-key")

@pytest.fixture
def publisher() -> MagicMock:
    """Publisher double that accepts every event."""
    mock = MagicMock()
    mock.publish.return_value = PublishResult(ok=True, status_code=202)
    return mock

@pytest.fixture
def client(auth_config, publisher) -> TestClient:
    return TestClient(create_application(config=auth_config, publisher=publisher))

@pytest.fixture
def sign():
    """Sign a body with the test secret."""
    def _sign(body: bytes, secret: str = "secret") -> str:
        return compute_signature(body, secret)
    return _sign
