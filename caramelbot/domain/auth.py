"""Slack request signing verification.

Pure Python, no framework dependencies.
"""

import hashlib
import hmac
import sys
import time
from typing import Mapping, Optional, Union

SIGNATURE_VERSION = "v0"
SIGNATURE_HEADER = "x-slack-signature"
TIMESTAMP_HEADER = "x-slack-request-timestamp"

# Maximum clock skew between the request timestamp and now
REPLAY_WINDOW_SECONDS = 300


def _log(msg: str):
    print(msg, file=sys.stderr)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is None:
        # Plain dicts are case-sensitive; Starlette's Headers are not
        for key, candidate in headers.items():
            if key.lower() == name:
                return candidate
    return value


def compute_signature(signing_secret: str, timestamp: str, body: str) -> str:
    """Return ``v0=<hex>`` for the given timestamp and body."""
    basestring = f"{SIGNATURE_VERSION}:{timestamp}:{body}"
    digest = hmac.new(
        signing_secret.encode("utf-8"), basestring.encode("utf-8"), hashlib.sha256
    ).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def verify_slack_request(
    headers: Mapping[str, str],
    raw_body: Union[bytes, str, None],
    fallback_body: str,
    signing_secret: str,
    now: Optional[float] = None,
) -> bool:
    """Check a request's signature and freshness.

    ``raw_body`` is signed when present; ``fallback_body`` (a re-serialized
    parsed body) is only used when there is no raw body. Returns False
    instead of raising on every failure path.
    """
    if not signing_secret:
        _log("Signing secret is not configured; rejecting request")
        return False

    signature = _header(headers, SIGNATURE_HEADER)
    timestamp = _header(headers, TIMESTAMP_HEADER)
    if not signature or not timestamp:
        _log("Missing Slack signature or timestamp header")
        return False

    try:
        ts = int(timestamp)
    except ValueError:
        _log(f"Malformed request timestamp: {timestamp!r}")
        return False

    current = time.time() if now is None else now
    if abs(int(current) - ts) > REPLAY_WINDOW_SECONDS:
        _log("Request timestamp is too old.")
        return False

    try:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode("utf-8")
        body = raw_body or fallback_body or ""
        expected = compute_signature(signing_secret, timestamp, body).encode("utf-8")
        supplied = signature.encode("utf-8")
        if len(expected) != len(supplied):
            verified = False
        else:
            verified = hmac.compare_digest(expected, supplied)
    except Exception as e:
        _log(f"Signature verification error: {e}")
        return False

    _log(f"Signature verification result: {verified}")
    return verified
