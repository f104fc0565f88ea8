"""
Veryfi Python SDK.

Usage:
    from veryfi import VeryfiClient

    client = VeryfiClient(
        client_id="...",
        client_secret="...",
        username="...",
        api_key="...",
    )
    response = client.process_document("receipt.jpg", categories=["Travel"])
    print(json.loads(response)["total"])

Every operation returns the raw JSON response body as a string, and ""
when the request could not be sent. Each one has an *_async coroutine
counterpart.
"""

from veryfi.auth import Credentials
from veryfi.client import VeryfiClient
from veryfi.config import VeryfiSettings
from veryfi.constants import DEFAULT_CATEGORIES, Endpoint
from veryfi.errors import ValidationError, VeryfiError
from veryfi.models import AddLineItem, UpdateLineItem

__all__ = [
    "VeryfiClient",
    "VeryfiSettings",
    "Credentials",
    "VeryfiError",
    "ValidationError",
    "AddLineItem",
    "UpdateLineItem",
    "Endpoint",
    "DEFAULT_CATEGORIES",
]

__version__ = "1.0.0"
