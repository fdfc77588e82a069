"""Outbound HTTP clients."""

from .datadog import DatadogEventPublisher, PublishResult

__all__ = ['DatadogEventPublisher', 'PublishResult']
