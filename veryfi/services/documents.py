"""Receipts and invoices: /partner/documents/."""

from pathlib import Path

from veryfi.constants import (
    AUTO_DELETE,
    BOOST_MODE,
    CATEGORIES,
    DEFAULT_CATEGORIES,
    EXTERNAL_ID,
    MAX_PAGES_TO_PROCESS,
    Endpoint,
)
from veryfi.files import add_file_path_to_parameters, add_file_to_parameters, add_url_to_parameters
from veryfi.network import NetworkClient


def _with_document_fields(
    arguments: dict,
    categories: list[str] | None,
    delete_after_processing: bool,
) -> dict:
    arguments[CATEGORIES] = list(categories) if categories else list(DEFAULT_CATEGORIES)
    arguments[AUTO_DELETE] = delete_after_processing
    return arguments


class DocumentServices(NetworkClient):
    """API operations for receipts and invoices."""

    def get_documents(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        """
        List documents. https://docs.veryfi.com/api/receipts-invoices/search-documents/

        Args:
            page: Page number, capped at 50 results per page
            page_size: Number of documents per page
            bounding_boxes: Return bounding_box and bounding_region for extracted fields
            confidence_details: Return score and ocr_score for extracted fields
            parameters: Additional request parameters

        Returns:
            JSON response body
        """
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return self._request("GET", Endpoint.DOCUMENTS.path(), arguments)

    async def get_documents_async(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return await self._request_async("GET", Endpoint.DOCUMENTS.path(), arguments)

    def get_document(self, document_id: str | int) -> str:
        """Retrieve a single document by id."""
        return self._request("GET", Endpoint.DOCUMENTS.path(document_id), self._id_arguments(document_id))

    async def get_document_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "GET", Endpoint.DOCUMENTS.path(document_id), self._id_arguments(document_id)
        )

    def _process_arguments(
        self,
        file_path: str | Path,
        categories: list[str] | None,
        delete_after_processing: bool,
        parameters: dict | None,
    ) -> dict:
        # Caller parameters win over the generated fields.
        arguments = add_file_path_to_parameters(file_path, with_prefix=True)
        _with_document_fields(arguments, categories, delete_after_processing)
        arguments.update(parameters or {})
        return arguments

    def _process_base64_arguments(
        self,
        file_name: str,
        file_data: str,
        categories: list[str] | None,
        delete_after_processing: bool,
        parameters: dict | None,
    ) -> dict:
        arguments = add_file_to_parameters(file_name, file_data)
        _with_document_fields(arguments, categories, delete_after_processing)
        arguments.update(parameters or {})
        return arguments

    def _process_url_arguments(
        self,
        file_url: str | None,
        file_urls: list[str] | None,
        categories: list[str] | None,
        delete_after_processing: bool,
        max_pages_to_process: int,
        boost_mode: bool,
        external_id: str | None,
        parameters: dict | None,
    ) -> dict:
        arguments = add_url_to_parameters(file_url, file_urls)
        _with_document_fields(arguments, categories, delete_after_processing)
        arguments[BOOST_MODE] = boost_mode
        arguments[EXTERNAL_ID] = external_id
        arguments[MAX_PAGES_TO_PROCESS] = max_pages_to_process
        arguments.update(parameters or {})
        return arguments

    def process_document(
        self,
        file_path: str | Path,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        parameters: dict | None = None,
    ) -> str:
        """
        Process a local file as a base64 encoded JSON upload.

        Args:
            file_path: Path on disk to the file to submit
            categories: Categories Veryfi may assign (default: DEFAULT_CATEGORIES)
            delete_after_processing: Delete the document from Veryfi once processed
            parameters: Additional request parameters

        Returns:
            JSON response body
        """
        arguments = self._process_arguments(file_path, categories, delete_after_processing, parameters)
        return self._request("POST", Endpoint.DOCUMENTS.path(), arguments)

    async def process_document_async(
        self,
        file_path: str | Path,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._process_arguments(file_path, categories, delete_after_processing, parameters)
        return await self._request_async("POST", Endpoint.DOCUMENTS.path(), arguments)

    def process_document_base64(
        self,
        file_name: str,
        file_data: str,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        parameters: dict | None = None,
    ) -> str:
        """Process already base64 encoded file content."""
        arguments = self._process_base64_arguments(
            file_name, file_data, categories, delete_after_processing, parameters
        )
        return self._request("POST", Endpoint.DOCUMENTS.path(), arguments)

    async def process_document_base64_async(
        self,
        file_name: str,
        file_data: str,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._process_base64_arguments(
            file_name, file_data, categories, delete_after_processing, parameters
        )
        return await self._request_async("POST", Endpoint.DOCUMENTS.path(), arguments)

    def process_document_upload(
        self,
        file_path: str | Path,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        parameters: dict | None = None,
    ) -> str:
        """
        Process a local file sent as multipart form data.

        Avoids the base64 overhead for large files. Extra parameters are sent
        as form fields, so they must be scalars or lists of scalars.
        """
        arguments = _with_document_fields({}, categories, delete_after_processing)
        arguments.update(parameters or {})
        return self._request_multipart(Endpoint.DOCUMENTS.path(), file_path, arguments)

    async def process_document_upload_async(
        self,
        file_path: str | Path,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = _with_document_fields({}, categories, delete_after_processing)
        arguments.update(parameters or {})
        return await self._request_multipart_async(Endpoint.DOCUMENTS.path(), file_path, arguments)

    def process_document_url(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        max_pages_to_process: int = 1,
        boost_mode: bool = False,
        external_id: str | None = None,
        parameters: dict | None = None,
    ) -> str:
        """
        Process a document from a publicly accessible URL.

        Args:
            file_url: URL of one file, required if file_urls is not given
            file_urls: URLs of several files, required if file_url is not given
            categories: Categories Veryfi may assign (default: DEFAULT_CATEGORIES)
            delete_after_processing: Delete the document from Veryfi once processed
            max_pages_to_process: Only the first N pages of a multi-page file are read
            boost_mode: Skip data enrichment for faster processing
            external_id: Optional custom document identifier
            parameters: Additional request parameters

        Returns:
            JSON response body
        """
        arguments = self._process_url_arguments(
            file_url, file_urls, categories, delete_after_processing,
            max_pages_to_process, boost_mode, external_id, parameters,
        )
        return self._request("POST", Endpoint.DOCUMENTS.path(), arguments)

    async def process_document_url_async(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        categories: list[str] | None = None,
        delete_after_processing: bool = False,
        max_pages_to_process: int = 1,
        boost_mode: bool = False,
        external_id: str | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._process_url_arguments(
            file_url, file_urls, categories, delete_after_processing,
            max_pages_to_process, boost_mode, external_id, parameters,
        )
        return await self._request_async("POST", Endpoint.DOCUMENTS.path(), arguments)

    def update_document(self, document_id: str | int, parameters: dict) -> str:
        """Update fields of a processed document, e.g. {"notes": "..."}."""
        return self._request("PUT", Endpoint.DOCUMENTS.path(document_id), dict(parameters))

    async def update_document_async(self, document_id: str | int, parameters: dict) -> str:
        return await self._request_async("PUT", Endpoint.DOCUMENTS.path(document_id), dict(parameters))

    def delete_document(self, document_id: str | int) -> str:
        return self._request("DELETE", Endpoint.DOCUMENTS.path(document_id), self._id_arguments(document_id))

    async def delete_document_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "DELETE", Endpoint.DOCUMENTS.path(document_id), self._id_arguments(document_id)
        )
