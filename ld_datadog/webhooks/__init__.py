"""Webhook handlers for inbound notifications.

The webhook router mounts every handler in webhooks/handlers/ under the
/webhook prefix, so the LaunchDarkly handler is served at
POST /webhook/launchdarkly.
"""

from fastapi import APIRouter

# Create the main webhook router with the /webhook prefix
router = APIRouter(prefix="/webhook", tags=["webhooks"])

from .handlers.launchdarkly import router as launchdarkly_router  # noqa: E402
router.include_router(launchdarkly_router)

__all__ = ['router']
