"""Data models for inbound notifications and outbound events."""

from .change_notification import (
    Access,
    Member,
    ChangeNotification,
    decode_change_notification
)
from .datadog_event import DatadogEvent, SOURCE_TYPE_NAME

__all__ = [
    # Inbound
    'Access',
    'Member',
    'ChangeNotification',
    'decode_change_notification',

    # Outbound
    'DatadogEvent',
    'SOURCE_TYPE_NAME'
]
