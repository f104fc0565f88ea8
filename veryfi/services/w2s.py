"""W-2 forms: /partner/w2s/."""

from pathlib import Path

from veryfi.constants import Endpoint
from veryfi.files import add_file_path_to_parameters, add_file_to_parameters, add_url_to_parameters
from veryfi.network import NetworkClient


class W2Services(NetworkClient):
    """API operations for W-2 wage and tax statements."""

    def get_w2s(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        """
        List processed W-2 forms.

        Args:
            page: Page number
            page_size: Number of W-2 forms per page
            bounding_boxes: Return bounding_box and bounding_region for extracted fields
            confidence_details: Return score and ocr_score for extracted fields
            parameters: Additional request parameters

        Returns:
            JSON response body
        """
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return self._request("GET", Endpoint.W2S.path(), arguments)

    async def get_w2s_async(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return await self._request_async("GET", Endpoint.W2S.path(), arguments)

    def get_w2(self, document_id: str | int) -> str:
        return self._request(
            "GET", Endpoint.W2S.path(document_id), self._id_arguments(document_id)
        )

    async def get_w2_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "GET", Endpoint.W2S.path(document_id), self._id_arguments(document_id)
        )

    def process_w2(self, file_path: str | Path, parameters: dict | None = None) -> str:
        """Process a local W-2 image or PDF."""
        arguments = add_file_path_to_parameters(file_path, parameters)
        return self._request("POST", Endpoint.W2S.path(), arguments)

    async def process_w2_async(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return await self._request_async("POST", Endpoint.W2S.path(), arguments)

    def process_w2_base64(
        self, file_name: str, file_data: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return self._request("POST", Endpoint.W2S.path(), arguments)

    async def process_w2_base64_async(
        self, file_name: str, file_data: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return await self._request_async("POST", Endpoint.W2S.path(), arguments)

    def process_w2_url(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        """Process a W-2 form from a publicly accessible URL."""
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return self._request("POST", Endpoint.W2S.path(), arguments)

    async def process_w2_url_async(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return await self._request_async("POST", Endpoint.W2S.path(), arguments)

    def delete_w2(self, document_id: str | int) -> str:
        return self._request(
            "DELETE", Endpoint.W2S.path(document_id), self._id_arguments(document_id)
        )

    async def delete_w2_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "DELETE", Endpoint.W2S.path(document_id), self._id_arguments(document_id)
        )
