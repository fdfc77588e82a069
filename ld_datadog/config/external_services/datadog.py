"""Datadog service configuration."""

import os
from typing import Dict, Any
from dataclasses import dataclass, field

import idna
from urllib3.exceptions import LocationValueError
from urllib3.util import parse_url

DEFAULT_DATADOG_SITE = "datadoghq.com"
EVENTS_PATH = "/api/v1/events"

def events_url_for(site: str) -> str:
    """Event ingestion endpoint for a Datadog site."""
    # https://docs.datadoghq.com/api/latest/events/#post-an-event
    return f"https://api.{site.strip().rstrip('/')}{EVENTS_PATH}"

def validate_site(site: str) -> None:
    """
    Check a Datadog site names a plain host, e.g. 'datadoghq.eu'.

    Raises:
        ValueError: If the site is blank or does not form a valid host
    """
    if not site.strip():
        raise ValueError("DD_SITE must not be blank")
    try:
        url = parse_url(events_url_for(site))
        if not url.host or url.port is not None or url.path != EVENTS_PATH:
            raise ValueError(f"DD_SITE '{site}' is not a host name")
        idna.encode(url.host, uts46=True)
    except (LocationValueError, idna.IDNAError, UnicodeError) as e:
        raise ValueError(f"DD_SITE '{site}' is not a valid host name") from e

@dataclass
class DatadogConfig:
    """Datadog configuration settings."""

    # Authentication
    api_key: str = field(default="", repr=False)

    # Site the account lives on, e.g. 'datadoghq.eu' or 'us3.datadoghq.com'
    site: str = ""

    def __post_init__(self):
        """Load configuration from environment if not provided."""
        if not self.api_key:
            self.api_key = os.environ.get('DD_API_KEY', '')
        if not self.site:
            self.site = os.environ.get('DD_SITE', '') or DEFAULT_DATADOG_SITE

    @property
    def events_url(self) -> str:
        """Event ingestion endpoint for the configured site."""
        return events_url_for(self.site)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format, without the API key."""
        return {
            'site': self.site,
            'events_url': self.events_url,
        }

    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.api_key.strip():
            raise ValueError("DD_API_KEY environment variable is required")
        validate_site(self.site)
        return True
