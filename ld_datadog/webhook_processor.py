"""Handler for processing LaunchDarkly webhook deliveries.

Each delivery is authenticated, decoded, filtered to flag changes and then
recorded as a Datadog event. Every delivery ends in exactly one
``WebhookResult``; nothing here raises for bad input or a failed publish.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .config.settings import AuthConfig
from .exceptions import DecodeError, MissingAccessError
from .models.change_notification import decode_change_notification
from .models.datadog_event import DatadogEvent
from .processors.event_builder import build_event
from .web.datadog import DatadogEventPublisher, PublishResult
from .utils.signature import verify_signature

logger = logging.getLogger(__name__)

# Only flag changes are recorded
RECORDED_KIND = "flag"

MESSAGE_NOT_AUTHENTICATED = "Request not authenticated"
MESSAGE_FAILED = "Failed to process request"
MESSAGE_OK = "👍"

class EventPublisher(Protocol):
    def publish(self, event: DatadogEvent) -> PublishResult: ...

class ProcessingOutcome(str, Enum):
    """Terminal state a delivery ended in."""
    REJECTED = "rejected"
    DECODE_FAILED = "decode_failed"
    SKIPPED = "skipped"
    PUBLISHED = "published"
    PUBLISH_FAILED = "publish_failed"

@dataclass(frozen=True)
class WebhookResult:
    """What happened to a delivery and the message returned to LaunchDarkly."""
    outcome: ProcessingOutcome
    message: str
    event: Optional[DatadogEvent] = None

    def to_response(self) -> dict:
        return {"message": self.message}

class WebhookProcessor:
    """Relays authenticated LaunchDarkly flag changes to Datadog."""

    def __init__(self, config: AuthConfig, publisher: Optional[EventPublisher] = None):
        self.config = config
        self.publisher = publisher or DatadogEventPublisher(
            events_url=config.events_url,
            api_key=config.api_key
        )

    def process(self, raw_body: bytes, signature_header: Optional[str]) -> WebhookResult:
        """
        Process a single webhook delivery.

        Args:
            raw_body: Request body exactly as received
            signature_header: Value of the X-LD-Signature header, if any

        Returns:
            WebhookResult: Outcome and response message for the delivery
        """
        if not verify_signature(raw_body, self.config.secret_bytes, signature_header):
            logger.warning("Request was not authenticated")
            return WebhookResult(ProcessingOutcome.REJECTED, MESSAGE_NOT_AUTHENTICATED)

        try:
            notification = decode_change_notification(raw_body)
        except DecodeError as e:
            logger.error(f"Failed to decode webhook payload: {e}")
            return WebhookResult(ProcessingOutcome.DECODE_FAILED, MESSAGE_FAILED)

        if notification.kind != RECORDED_KIND:
            logger.info(f"Skipping {notification.kind} change to '{notification.name}'")
            return WebhookResult(ProcessingOutcome.SKIPPED, MESSAGE_OK)

        try:
            event = build_event(notification)
        except MissingAccessError as e:
            logger.error(f"Cannot build event for flag '{notification.name}': {e}")
            return WebhookResult(ProcessingOutcome.DECODE_FAILED, MESSAGE_FAILED)

        result = self.publisher.publish(event)
        if not result.ok:
            # Publishing is best effort; LaunchDarkly still gets a success response
            logger.error(f"Failed to record event: {result.error}")
            return WebhookResult(ProcessingOutcome.PUBLISH_FAILED, MESSAGE_OK, event)

        logger.info(f"Recorded event: {event.title}")
        return WebhookResult(ProcessingOutcome.PUBLISHED, MESSAGE_OK, event)
