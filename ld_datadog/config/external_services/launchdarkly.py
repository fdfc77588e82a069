"""LaunchDarkly webhook configuration."""

import os
from dataclasses import dataclass, field

# https://docs.launchdarkly.com/home/connecting/webhooks#signing-webhooks
SIGNATURE_HEADER = "X-LD-Signature"

@dataclass
class LaunchDarklyConfig:
    """LaunchDarkly webhook settings."""

    # Shared secret used to sign webhook bodies
    webhook_secret: str = field(default="", repr=False)
    signature_header: str = SIGNATURE_HEADER

    def __post_init__(self):
        """Load the webhook secret from environment if not provided."""
        if not self.webhook_secret:
            self.webhook_secret = os.environ.get('LD_SECRET', '')

    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.webhook_secret.strip():
            raise ValueError("LD_SECRET environment variable is required")
        return True
