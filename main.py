"""Main application entry point."""

from ld_datadog.config.environment import IS_PRODUCTION_ENVIRONMENT, PORT, WEB_CONCURRENCY
from ld_datadog.api.app import app

if __name__ == "__main__":
    import uvicorn

    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - use direct app instance for better debugging
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=PORT,
            log_level="debug"
        )
    else:
        # Production mode - use string reference for proper multi-worker support
        uvicorn.run(
            "ld_datadog.api.app:app",  # String reference required for multiple workers
            host="0.0.0.0",
            port=PORT,
            reload=False,
            workers=WEB_CONCURRENCY,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
