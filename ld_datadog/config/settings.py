"""Process-wide credentials for the webhook relay.

Both credentials are read once from the environment and never change for the
lifetime of the process. Tests and callers that need other values construct
an ``AuthConfig`` directly instead of touching the environment.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from . import environment  # noqa: F401  loads .env before the service configs read os.environ
from .external_services import (
    DatadogConfig,
    LaunchDarklyConfig,
    DEFAULT_DATADOG_SITE,
    events_url_for,
    validate_site
)
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AuthConfig:
    """Shared LaunchDarkly webhook secret and Datadog API key."""

    secret: str = field(repr=False)
    api_key: str = field(repr=False)
    datadog_site: str = DEFAULT_DATADOG_SITE

    def __post_init__(self):
        try:
            validate_site(self.datadog_site)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    @property
    def secret_bytes(self) -> bytes:
        return self.secret.encode('utf-8')

    @property
    def events_url(self) -> str:
        return events_url_for(self.datadog_site)

def load_auth_config() -> AuthConfig:
    """
    Read and validate credentials from the environment.

    Returns:
        AuthConfig: Validated credentials

    Raises:
        ConfigurationError: If LD_SECRET or DD_API_KEY is missing
    """
    launchdarkly = LaunchDarklyConfig()
    datadog = DatadogConfig()
    try:
        launchdarkly.validate()
        datadog.validate()
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    logger.info(f"Loaded configuration for Datadog site {datadog.site}")
    return AuthConfig(
        secret=launchdarkly.webhook_secret,
        api_key=datadog.api_key,
        datadog_site=datadog.site.strip()
    )

@lru_cache(maxsize=1)
def get_auth_config() -> AuthConfig:
    """Credentials for this process, loaded on first use."""
    return load_auth_config()
