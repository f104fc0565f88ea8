"""Splitting multi-document files: /partner/documents-set/."""

from pathlib import Path

from veryfi.constants import Endpoint
from veryfi.files import add_file_path_to_parameters, add_file_to_parameters, add_url_to_parameters
from veryfi.network import NetworkClient


class SplitServices(NetworkClient):
    """
    API operations for document sets.

    A single PDF holding several receipts or invoices is split into one
    document per item and each part is processed.
    """

    def split_document(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return self._request("POST", Endpoint.SPLIT.path(), arguments)

    async def split_document_async(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return await self._request_async("POST", Endpoint.SPLIT.path(), arguments)

    def split_document_base64(self, file_name: str, file_data: str, parameters: dict | None = None) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return self._request("POST", Endpoint.SPLIT.path(), arguments)

    async def split_document_base64_async(
        self, file_name: str, file_data: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return await self._request_async("POST", Endpoint.SPLIT.path(), arguments)

    def split_document_url(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return self._request("POST", Endpoint.SPLIT.path(), arguments)

    async def split_document_url_async(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return await self._request_async("POST", Endpoint.SPLIT.path(), arguments)

    def get_split_documents(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        """List document sets created by split_document*."""
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return self._request("GET", Endpoint.SPLIT.path(), arguments)

    async def get_split_documents_async(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return await self._request_async("GET", Endpoint.SPLIT.path(), arguments)

    def get_split_document(self, document_id: str | int) -> str:
        return self._request("GET", Endpoint.SPLIT.path(document_id), self._id_arguments(document_id))

    async def get_split_document_async(self, document_id: str | int) -> str:
        return await self._request_async("GET", Endpoint.SPLIT.path(document_id), self._id_arguments(document_id))
