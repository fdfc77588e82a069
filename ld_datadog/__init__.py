"""LaunchDarkly webhook relay that records flag changes as Datadog events."""

__version__ = "1.0.0"
