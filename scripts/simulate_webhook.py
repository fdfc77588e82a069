#!/usr/bin/env python3
"""Utility script to simulate a LaunchDarkly webhook delivery.

Signs a payload file with LD_SECRET the same way LaunchDarkly does and posts it
to a running instance of the relay.

Example:
    python scripts/simulate_webhook.py ld_datadog/tests/data/flag_payload.json
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import requests

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from ld_datadog.config.environment import IS_PRODUCTION_ENVIRONMENT  # noqa: F401  loads .env
from ld_datadog.config.external_services import SIGNATURE_HEADER
from ld_datadog.utils.signature import compute_signature

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8000/webhook/launchdarkly"

def simulate_webhook(payload_path: Path, url: str, secret: str, unsigned: bool = False):
    """
    Send a payload file to the webhook endpoint.

    Args:
        payload_path: JSON file to send as the body
        url: Webhook endpoint
        secret: Secret to sign the body with
        unsigned: Send without a signature header
    """
    body = payload_path.read_bytes()
    headers = {"Content-Type": "application/json"}
    if not unsigned:
        headers[SIGNATURE_HEADER] = compute_signature(body, secret)

    logger.info(f"Sending {payload_path.name} to {url}...")
    response = requests.post(url, data=body, headers=headers, timeout=30)
    logger.info(f"Webhook response status: {response.status_code}")
    logger.info(f"Webhook response: {response.json()}")

def main():
    parser = argparse.ArgumentParser(description="Simulate a signed LaunchDarkly webhook delivery")
    parser.add_argument('payload', type=Path, help="Path to a JSON payload file")
    parser.add_argument('--url', default=DEFAULT_URL, help=f"Webhook endpoint (default: {DEFAULT_URL})")
    parser.add_argument('--unsigned', action='store_true', help="Omit the signature header")
    args = parser.parse_args()

    secret = os.environ.get('LD_SECRET')
    if not secret and not args.unsigned:
        logger.error("LD_SECRET environment variable is required to sign the payload")
        sys.exit(1)

    try:
        simulate_webhook(args.payload, args.url, secret or '', args.unsigned)
    except requests.RequestException as e:
        logger.error(f"Error simulating webhook: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
