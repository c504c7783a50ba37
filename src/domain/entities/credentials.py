"""Merchant credentials for the Daraja API."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """
    Credentials for a single merchant shortcode.

    Loaded once at startup and immutable for the process lifetime.
    """

    consumer_key: str
    consumer_secret: str = field(repr=False)
    shortcode: str
    passkey: str = field(repr=False)
    callback_url: str
