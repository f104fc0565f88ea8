"""
Shared HTTP transport for all Veryfi service classes.

Synchronous and asynchronous requests using httpx. Every request is signed,
sent to {base_url}/v{api_version}{endpoint}, and answered with the raw
response body. Transport failures are logged and turned into "".
"""

import contextlib
import logging
from pathlib import Path

import httpx

from veryfi.auth import Credentials, build_headers
from veryfi.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from veryfi.constants import CONTENT_TYPE, X_VERYFI_TRACE_ID

logger = logging.getLogger(__name__)


class NetworkClient:
    """
    Base class holding credentials and HTTP clients.

    Args:
        credentials: Veryfi credentials
        base_url: API base URL (default: https://api.veryfi.com/api/)
        api_version: API version number (default: 8)
        timeout: Request timeout in seconds (default: 120)
        http_client: Optional httpx.Client to use instead of creating one
        async_http_client: Optional httpx.AsyncClient for the *_async methods
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        api_version: int = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
    ):
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)
        self._async_client = async_http_client

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/v{self.api_version}"

    @contextlib.asynccontextmanager
    async def _async_session(self):
        """
        Yield the injected AsyncClient, or a client scoped to one request.

        No AsyncClient is kept on the instance unless one was injected, so
        close() never leaves an open async connection pool behind.
        """
        if self._async_client is not None:
            yield self._async_client
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                yield client

    def _prepare(self, method: str, endpoint: str, arguments: dict | None) -> tuple[str, dict]:
        """Build the URL and httpx keyword arguments for one request."""
        arguments = arguments or {}
        kwargs: dict = {"headers": build_headers(self.credentials, arguments)}
        if method == "GET":
            if arguments:
                kwargs["params"] = arguments
        else:
            kwargs["json"] = arguments
        return self.api_url + endpoint, kwargs

    def _prepare_multipart(self, endpoint: str, file_path: str | Path, arguments: dict) -> tuple[str, dict]:
        path = Path(file_path)
        headers = build_headers(self.credentials, arguments)
        # Let httpx set Content-Type for multipart
        headers.pop(CONTENT_TYPE)
        kwargs = {
            "headers": headers,
            "data": arguments,
            "files": {"file": (path.name, path.read_bytes())},
        }
        return self.api_url + endpoint, kwargs

    def _handle_response(self, response: httpx.Response) -> str:
        trace_id = response.headers.get(X_VERYFI_TRACE_ID)
        if trace_id:
            logger.info("x-veryfi-trace-id: %s", trace_id)
        return response.text

    def _request(self, method: str, endpoint: str, arguments: dict | None = None) -> str:
        """Make an HTTP request and return the response body, or "" on transport failure."""
        url, kwargs = self._prepare(method, endpoint, arguments)
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, endpoint, e)
            return ""
        return self._handle_response(response)

    async def _request_async(self, method: str, endpoint: str, arguments: dict | None = None) -> str:
        """Async counterpart of _request."""
        url, kwargs = self._prepare(method, endpoint, arguments)
        try:
            async with self._async_session() as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, endpoint, e)
            return ""
        return self._handle_response(response)

    def _request_multipart(self, endpoint: str, file_path: str | Path, arguments: dict | None = None) -> str:
        """POST a file as multipart form data with the arguments as form fields."""
        try:
            url, kwargs = self._prepare_multipart(endpoint, file_path, arguments or {})
        except OSError as e:
            logger.error("Could not read %s: %s", file_path, e)
            return ""
        try:
            response = self._client.post(url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("POST %s failed: %s", endpoint, e)
            return ""
        return self._handle_response(response)

    async def _request_multipart_async(
        self, endpoint: str, file_path: str | Path, arguments: dict | None = None
    ) -> str:
        try:
            url, kwargs = self._prepare_multipart(endpoint, file_path, arguments or {})
        except OSError as e:
            logger.error("Could not read %s: %s", file_path, e)
            return ""
        try:
            async with self._async_session() as client:
                response = await client.post(url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("POST %s failed: %s", endpoint, e)
            return ""
        return self._handle_response(response)

    @staticmethod
    def _list_arguments(
        page: int,
        page_size: int,
        bounding_boxes: bool | None = None,
        confidence_details: bool | None = None,
        parameters: dict | None = None,
    ) -> dict:
        arguments = dict(parameters or {})
        arguments["page"] = page
        arguments["page_size"] = page_size
        if bounding_boxes is not None:
            arguments["bounding_boxes"] = bounding_boxes
        if confidence_details is not None:
            arguments["confidence_details"] = confidence_details
        return arguments

    @staticmethod
    def _id_arguments(document_id: str | int) -> dict:
        return {"id": document_id}

    def close(self):
        """Close the underlying HTTP client."""
        if self._owns_client:
            self._client.close()

    async def aclose(self):
        """Async counterpart of close(). An injected AsyncClient stays open."""
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()
