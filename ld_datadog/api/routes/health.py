"""Health check route.

Reports whether the webhook processor is configured so a platform health
probe can tell a process that would refuse webhooks from a ready one.
"""

from fastapi import APIRouter, Request

from ld_datadog import __version__
from ld_datadog.config.environment import IS_PRODUCTION_ENVIRONMENT

router = APIRouter(tags=["health"])

@router.get("/")
async def health_check(request: Request):
    processor = getattr(request.app.state, 'processor', None)
    return {
        "status": "healthy" if processor is not None else "unconfigured",
        "environment": "production" if IS_PRODUCTION_ENVIRONMENT else "development",
        "version": __version__,
        "datadog_site": processor.config.datadog_site if processor is not None else None
    }
