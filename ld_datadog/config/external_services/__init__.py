"""External service configurations."""

from .launchdarkly import (
    LaunchDarklyConfig,
    SIGNATURE_HEADER
)

from .datadog import (
    DatadogConfig,
    DEFAULT_DATADOG_SITE,
    events_url_for,
    validate_site
)

__all__ = [
    'LaunchDarklyConfig',
    'SIGNATURE_HEADER',
    'DatadogConfig',
    'DEFAULT_DATADOG_SITE',
    'events_url_for',
    'validate_site'
]
