"""
Request authentication for the Veryfi API.

Every request carries the client id, a static ``apikey`` authorization
header and an HMAC-SHA256 signature of the request arguments keyed with
the client secret.
"""

import base64
import hashlib
import hmac
import json
import time
from dataclasses import dataclass

from veryfi.constants import (
    ACCEPT,
    APPLICATION_JSON,
    AUTHORIZATION,
    CLIENT_ID,
    CONTENT_TYPE,
    TIMESTAMP,
    USER_AGENT,
    USER_AGENT_PYTHON,
    X_VERYFI_REQUEST_SIGNATURE,
    X_VERYFI_REQUEST_TIMESTAMP,
)


@dataclass(frozen=True)
class Credentials:
    """Veryfi credentials for API access."""

    client_id: str
    client_secret: str
    username: str
    api_key: str

    def __post_init__(self):
        for name in ("client_id", "client_secret", "username", "api_key"):
            if not getattr(self, name):
                raise ValueError(f"{name} is required")

    @property
    def authorization(self) -> str:
        return f"apikey {self.username}:{self.api_key}"


def current_timestamp() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


def generate_signature(client_secret: str, payload: dict, timestamp: int) -> str:
    """
    Sign request arguments.

    Args:
        client_secret: Secret provided by Veryfi
        payload: Request arguments (query parameters or JSON body)
        timestamp: Milliseconds since the epoch, also sent as a header

    Returns:
        Base64 encoded HMAC-SHA256 digest
    """
    signed = dict(payload)
    signed[TIMESTAMP] = str(timestamp)
    message = json.dumps(signed, separators=(",", ":"), ensure_ascii=False)
    digest = hmac.new(
        client_secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def build_headers(
    credentials: Credentials,
    payload: dict,
    timestamp: int | None = None,
) -> dict[str, str]:
    """Build the full set of headers for one request."""
    if timestamp is None:
        timestamp = current_timestamp()
    return {
        USER_AGENT: USER_AGENT_PYTHON,
        ACCEPT: APPLICATION_JSON,
        CONTENT_TYPE: APPLICATION_JSON,
        CLIENT_ID: credentials.client_id,
        AUTHORIZATION: credentials.authorization,
        X_VERYFI_REQUEST_TIMESTAMP: str(timestamp),
        X_VERYFI_REQUEST_SIGNATURE: generate_signature(
            credentials.client_secret, payload, timestamp
        ),
    }
