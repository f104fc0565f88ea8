"""
Veryfi Python SDK client.

Every service class shares one set of credentials and one pair of httpx
clients through NetworkClient. VeryfiClient combines all of them.

Usage:
    client = VeryfiClient(client_id, client_secret, username, api_key)
    response = client.process_document("receipt.jpg")
"""

import httpx

from veryfi.auth import Credentials
from veryfi.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, VeryfiSettings
from veryfi.services import (
    AnyDocumentServices,
    BankStatementServices,
    BusinessCardServices,
    CheckServices,
    ClassifyServices,
    ContractServices,
    DocumentServices,
    LineItemServices,
    SplitServices,
    TagServices,
    W2Services,
    W8BenEServices,
    W9Services,
)


class VeryfiClient(
    DocumentServices,
    LineItemServices,
    TagServices,
    AnyDocumentServices,
    BankStatementServices,
    BusinessCardServices,
    CheckServices,
    W2Services,
    W9Services,
    W8BenEServices,
    ContractServices,
    ClassifyServices,
    SplitServices,
):
    """
    Veryfi API client.

    Args:
        client_id: Client id provided by Veryfi
        client_secret: Client secret used to sign requests
        username: Veryfi username
        api_key: API key for the username
        base_url: API base URL (default: https://api.veryfi.com/api/)
        api_version: API version number (default: 8)
        timeout: Request timeout in seconds (default: 120)
        http_client: Optional httpx.Client, e.g. with custom transport or proxies
        async_http_client: Optional httpx.AsyncClient for the *_async methods
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        username: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: int = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(
            Credentials(client_id, client_secret, username, api_key),
            base_url=base_url,
            api_version=api_version,
            timeout=timeout,
            http_client=http_client,
            async_http_client=async_http_client,
        )

    @classmethod
    def from_env(cls, settings: VeryfiSettings | None = None, **kwargs) -> "VeryfiClient":
        """
        Build a client from VERYFI_* environment variables.

        Args:
            settings: Pre-loaded settings (default: read from the environment)
            **kwargs: Passed to the constructor, e.g. http_client

        Raises:
            pydantic.ValidationError: If a required variable is missing
        """
        settings = settings or VeryfiSettings()
        options = {
            "base_url": settings.base_url,
            "api_version": settings.api_version,
            "timeout": settings.timeout,
        }
        options.update(kwargs)
        return cls(
            settings.client_id,
            settings.client_secret,
            settings.username,
            settings.api_key,
            **options,
        )
