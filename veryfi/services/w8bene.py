"""W-8BEN-E forms: /partner/w-8ben-e/."""

from pathlib import Path

from veryfi.constants import Endpoint
from veryfi.files import add_file_path_to_parameters, add_file_to_parameters, add_url_to_parameters
from veryfi.network import NetworkClient


class W8BenEServices(NetworkClient):
    """API operations for W-8BEN-E forms."""

    def get_w8benes(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        """List processed W-8BEN-E forms. Paging and detail flags as in get_documents."""
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return self._request("GET", Endpoint.W8BENE.path(), arguments)

    async def get_w8benes_async(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return await self._request_async("GET", Endpoint.W8BENE.path(), arguments)

    def get_w8bene(self, document_id: str | int) -> str:
        return self._request(
            "GET", Endpoint.W8BENE.path(document_id), self._id_arguments(document_id)
        )

    async def get_w8bene_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "GET", Endpoint.W8BENE.path(document_id), self._id_arguments(document_id)
        )

    def process_w8bene(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return self._request("POST", Endpoint.W8BENE.path(), arguments)

    async def process_w8bene_async(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return await self._request_async("POST", Endpoint.W8BENE.path(), arguments)

    def process_w8bene_base64(
        self, file_name: str, file_data: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return self._request("POST", Endpoint.W8BENE.path(), arguments)

    async def process_w8bene_base64_async(
        self, file_name: str, file_data: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return await self._request_async("POST", Endpoint.W8BENE.path(), arguments)

    def process_w8bene_url(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return self._request("POST", Endpoint.W8BENE.path(), arguments)

    async def process_w8bene_url_async(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return await self._request_async("POST", Endpoint.W8BENE.path(), arguments)

    def delete_w8bene(self, document_id: str | int) -> str:
        return self._request(
            "DELETE", Endpoint.W8BENE.path(document_id), self._id_arguments(document_id)
        )

    async def delete_w8bene_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "DELETE", Endpoint.W8BENE.path(document_id), self._id_arguments(document_id)
        )
