"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Internal imports
from ld_datadog.config.environment import IS_PRODUCTION_ENVIRONMENT # Environment must be imported first
from ld_datadog import __version__
from ld_datadog.config.settings import AuthConfig, get_auth_config
from ld_datadog.exceptions import ConfigurationError
from ld_datadog.utils.logging_config import setup_logging
from ld_datadog.webhook_processor import EventPublisher, WebhookProcessor
from ld_datadog.webhooks import router as webhook_router
from .routes import health

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    if getattr(app.state, 'processor', None) is None:
        try:
            app.state.processor = WebhookProcessor(get_auth_config())
            logger.info("Webhook processor initialized successfully")
        except ConfigurationError as e:
            logger.critical(f"Startup failed: {e}")
            raise
    yield

async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Refuse requests while the service has no valid credentials."""
    logger.critical(f"Refusing request to {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"message": "Service not configured"})

def create_application(
    config: Optional[AuthConfig] = None,
    publisher: Optional[EventPublisher] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Credentials to use; read from the environment at startup when omitted
        publisher: Event publisher to use instead of the Datadog client
    """
    app = FastAPI(
        title="LaunchDarkly Datadog Events",
        description="Records LaunchDarkly flag changes as Datadog events",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )

    if config is not None:
        app.state.processor = WebhookProcessor(config, publisher)

    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    # Include health check router without prefix
    app.include_router(health.router)
    app.include_router(webhook_router)

    return app

# Create the application instance
app = create_application()
