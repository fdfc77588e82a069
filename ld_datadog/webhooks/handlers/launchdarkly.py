"""Handler for LaunchDarkly change webhooks.

LaunchDarkly only checks that the delivery was received, so every processed
request gets a 200 response and the outcome is carried in the message.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.concurrency import run_in_threadpool

from ...config.external_services import SIGNATURE_HEADER
from ...config.settings import get_auth_config
from ...webhook_processor import WebhookProcessor

logger = logging.getLogger(__name__)

# Create router without prefix (it's handled by the main webhook router)
router = APIRouter(tags=["launchdarkly"])

def get_processor(request: Request) -> WebhookProcessor:
    """
    Return the application's webhook processor, creating it on first use.

    Raises:
        ConfigurationError: If the credentials are missing from the environment
    """
    processor = getattr(request.app.state, 'processor', None)
    if processor is None:
        processor = WebhookProcessor(get_auth_config())
        request.app.state.processor = processor
    return processor

@router.post("/launchdarkly")
async def handle_launchdarkly_webhook(
    request: Request,
    signature: Optional[str] = Header(None, alias=SIGNATURE_HEADER),
    processor: WebhookProcessor = Depends(get_processor)
):
    """Record a LaunchDarkly flag change as a Datadog event."""
    # The signature covers the exact bytes sent, so never re-serialize the body
    body = await request.body()

    # Publishing blocks on the Datadog request
    result = await run_in_threadpool(processor.process, body, signature)
    logger.debug(f"Webhook finished as {result.outcome.value}")
    return result.to_response()
