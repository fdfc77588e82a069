"""Tests for loading credentials from the environment."""

import pytest

from ld_datadog.config.external_services import DatadogConfig, LaunchDarklyConfig
from ld_datadog.config.settings import AuthConfig, get_auth_config, load_auth_config
from ld_datadog.exceptions import ConfigurationError

@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("LD_SECRET", "env-secret")
    monkeypatch.setenv("DD_API_KEY", "env-key")
    monkeypatch.delenv("DD_SITE", raising=False)
    return monkeypatch

def test_loads_credentials(env):
    config = load_auth_config()

    assert config == AuthConfig(secret="env-secret", api_key="env-key", datadog_site="datadoghq.com")
    assert config.events_url == "https://api.datadoghq.com/api/v1/events"

def test_custom_site(env):
    env.setenv("DD_SITE", "us3.datadoghq.com")
    assert load_auth_config().events_url == "https://api.us3.datadoghq.com/api/v1/events"

@pytest.mark.parametrize("name", ["LD_SECRET", "DD_API_KEY"])
def test_missing_value_is_fatal(env, name):
    env.delenv(name)
    with pytest.raises(ConfigurationError, match=name):
        load_auth_config()

@pytest.mark.parametrize("name", ["LD_SECRET", "DD_API_KEY"])
def test_blank_value_is_fatal(env, name):
    env.setenv(name, "   ")
    with pytest.raises(ConfigurationError, match=name):
        load_auth_config()

def test_config_is_cached(env):
    first = get_auth_config()
    env.setenv("LD_SECRET", "rotated")
    assert get_auth_config() is first

def test_config_is_immutable():
    config = AuthConfig(secret="secret", api_key="key")
    with pytest.raises(AttributeError):
        config.secret = "other"

def test_credentials_are_masked_in_repr():
    assert "secret-value" not in repr(AuthConfig(secret="secret-value", api_key="key-value"))
    assert "key-value" not in repr(AuthConfig(secret="secret-value", api_key="key-value"))
    assert "secret-value" not in repr(LaunchDarklyConfig(webhook_secret="secret-value"))
    assert "key-value" not in repr(DatadogConfig(api_key="key-value"))

def test_datadog_config_dict_omits_api_key():
    assert "api_key" not in DatadogConfig(api_key="key-value", site="datadoghq.eu").to_dict()

@pytest.mark.parametrize("site", [
    "x" * 300,
    "datadoghq.com:8443",
    "datadoghq.com/api",
    "datadog hq.com",
    "bad..datadoghq.com",
])
def test_invalid_site_is_fatal(env, site):
    env.setenv("DD_SITE", site)
    with pytest.raises(ConfigurationError, match="DD_SITE"):
        load_auth_config()

@pytest.mark.parametrize("site", ["datadoghq.eu", "us3.datadoghq.com", "ap1.datadoghq.com", "DatadogHQ.com"])
def test_known_sites_are_accepted(env, site):
    env.setenv("DD_SITE", site)
    assert load_auth_config().datadog_site == site

def test_auth_config_rejects_invalid_site():
    with pytest.raises(ConfigurationError, match="DD_SITE"):
        AuthConfig(secret="secret", api_key="key", datadog_site="x" * 300)
