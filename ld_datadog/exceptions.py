"""Exceptions raised while relaying LaunchDarkly webhooks."""


class WebhookError(Exception):
    """Base exception for webhook relay errors."""
    pass


class ConfigurationError(WebhookError):
    """Raised when required configuration is missing or invalid."""
    pass


class DecodeError(WebhookError):
    """Raised when a webhook payload cannot be decoded."""
    pass


class MissingAccessError(DecodeError):
    """Raised when a change notification has no access entry."""

    def __init__(self, message: str = "missing access entry"):
        super().__init__(message)


class PublishError(WebhookError):
    """Raised when an event could not be delivered to Datadog."""
    pass
