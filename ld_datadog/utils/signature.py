"""LaunchDarkly webhook signature verification.

LaunchDarkly signs every webhook body with HMAC-SHA256 using the secret
configured on the webhook and sends the hex digest in the ``X-LD-Signature``
header. See https://docs.launchdarkly.com/home/connecting/webhooks#signing-webhooks
"""

import binascii
import hashlib
import hmac
from typing import Optional, Union

def _digest(raw_body: bytes, secret: Union[str, bytes]) -> bytes:
    if isinstance(secret, str):
        secret = secret.encode('utf-8')
    return hmac.new(secret, raw_body, hashlib.sha256).digest()

def compute_signature(raw_body: bytes, secret: Union[str, bytes]) -> str:
    """Return the hex encoded HMAC-SHA256 of a body, as LaunchDarkly sends it."""
    return _digest(raw_body, secret).hex()

def verify_signature(
    raw_body: bytes,
    secret: Union[str, bytes],
    signature_header: Optional[str]
) -> bool:
    """
    Verify a webhook body was signed by LaunchDarkly.

    Args:
        raw_body: The request body exactly as received
        secret: The shared webhook secret
        signature_header: Value of the X-LD-Signature header, if present

    Returns:
        bool: True only when the header holds the exact digest of the body.
            Missing, malformed or mismatched signatures return False.
    """
    if not signature_header:
        return False

    try:
        # unhexlify, unlike bytes.fromhex, rejects whitespace between digit pairs
        claimed = binascii.unhexlify(signature_header.strip())
    except (binascii.Error, ValueError):
        return False

    # compare_digest runs in constant time for equal lengths and rejects unequal ones
    return hmac.compare_digest(_digest(raw_body, secret), claimed)
