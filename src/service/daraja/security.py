"""Timestamp, password and basic-auth derivation for the Daraja API."""

import base64
from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def _b64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def generate_timestamp(now: datetime | None = None) -> str:
    """
    Format a moment as a 14-digit ``YYYYMMDDHHmmss`` string in UTC.

    Sub-second precision is dropped, never rounded. A naive ``now`` is
    taken to already be UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)

    return now.strftime(TIMESTAMP_FORMAT)


def generate_password(shortcode: str, passkey: str, timestamp: str) -> str:
    """base64(shortcode + passkey + timestamp)"""
    return _b64(f"{shortcode}{passkey}{timestamp}")


def basic_auth_header(consumer_key: str, consumer_secret: str) -> str:
    """Authorization header value for the OAuth token endpoint."""
    return f"Basic {_b64(f'{consumer_key}:{consumer_secret}')}"
