"""Process environment for the relay.

Importing this module loads ``.env`` (development convenience; in production
the variables come from the platform) and exposes the settings that shape
the process itself. Credentials are not read here, see ``config.settings``.

Usage:
    from ld_datadog.config.environment import IS_PRODUCTION_ENVIRONMENT, PORT
"""

import os
import logging
from dotenv import load_dotenv

# Must run before any module reads os.environ
load_dotenv()

def _int_setting(name: str, default: int) -> int:
    value = os.environ.get(name, '').strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logging.warning(f"{name}='{value}' is not an integer, using {default}")
        return default

env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"ENVIRONMENT '{env_setting}' is not 'development' or 'production', "
        "running as development."
    )

# Root log level name, validated by utils.logging_config
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').strip().upper() or 'INFO'

# uvicorn bind port and production worker count
PORT = _int_setting('PORT', 8000)
WEB_CONCURRENCY = _int_setting('WEB_CONCURRENCY', 2)

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'LOG_LEVEL', 'PORT', 'WEB_CONCURRENCY']
