"""Logging configuration for the application."""

import logging
import sys

from ..config.environment import LOG_LEVEL

_configured = False

def setup_logging():
    """Configure logging for the application."""
    global _configured
    if _configured:
        return

    level_name = LOG_LEVEL
    level = getattr(logging, level_name, None)
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.INFO

    # Create a formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Create a console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    # Configure the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # urllib3 logs full request URLs at DEBUG, api_key query parameter included
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    if unknown_level:
        logging.getLogger(__name__).warning(f"Unknown LOG_LEVEL '{level_name}', using INFO")
    _configured = True
