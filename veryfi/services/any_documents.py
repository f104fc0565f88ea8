"""Any document type, extracted with a named blueprint: /partner/any-documents/."""

from pathlib import Path

from veryfi.constants import BLUEPRINT_NAME, Endpoint
from veryfi.files import add_file_path_to_parameters, add_file_to_parameters, add_url_to_parameters
from veryfi.network import NetworkClient


class AnyDocumentServices(NetworkClient):
    """
    API operations for documents processed with a blueprint.

    A blueprint names the extraction schema on the Veryfi side, e.g.
    "passport" or "us_driver_license".
    """

    def get_any_documents(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return self._request("GET", Endpoint.ANY_DOCUMENTS.path(), arguments)

    async def get_any_documents_async(
        self,
        page: int = 1,
        page_size: int = 50,
        bounding_boxes: bool = False,
        confidence_details: bool = False,
        parameters: dict | None = None,
    ) -> str:
        arguments = self._list_arguments(page, page_size, bounding_boxes, confidence_details, parameters)
        return await self._request_async("GET", Endpoint.ANY_DOCUMENTS.path(), arguments)

    def get_any_document(self, document_id: str | int) -> str:
        return self._request("GET", Endpoint.ANY_DOCUMENTS.path(document_id), self._id_arguments(document_id))

    async def get_any_document_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "GET", Endpoint.ANY_DOCUMENTS.path(document_id), self._id_arguments(document_id)
        )

    def process_any_document(
        self, file_path: str | Path, blueprint_name: str, parameters: dict | None = None
    ) -> str:
        """
        Process a local file with a blueprint.

        Args:
            file_path: Path on disk to the file to submit
            blueprint_name: Name of the extraction blueprint
            parameters: Additional request parameters

        Returns:
            JSON response body
        """
        arguments = add_file_path_to_parameters(file_path, parameters)
        arguments[BLUEPRINT_NAME] = blueprint_name
        return self._request("POST", Endpoint.ANY_DOCUMENTS.path(), arguments)

    async def process_any_document_async(
        self, file_path: str | Path, blueprint_name: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        arguments[BLUEPRINT_NAME] = blueprint_name
        return await self._request_async("POST", Endpoint.ANY_DOCUMENTS.path(), arguments)

    def process_any_document_base64(
        self, file_name: str, file_data: str, blueprint_name: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        arguments[BLUEPRINT_NAME] = blueprint_name
        return self._request("POST", Endpoint.ANY_DOCUMENTS.path(), arguments)

    async def process_any_document_base64_async(
        self, file_name: str, file_data: str, blueprint_name: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        arguments[BLUEPRINT_NAME] = blueprint_name
        return await self._request_async("POST", Endpoint.ANY_DOCUMENTS.path(), arguments)

    def process_any_document_url(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        blueprint_name: str | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        arguments[BLUEPRINT_NAME] = blueprint_name
        return self._request("POST", Endpoint.ANY_DOCUMENTS.path(), arguments)

    async def process_any_document_url_async(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        blueprint_name: str | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        arguments[BLUEPRINT_NAME] = blueprint_name
        return await self._request_async("POST", Endpoint.ANY_DOCUMENTS.path(), arguments)

    def delete_any_document(self, document_id: str | int) -> str:
        return self._request(
            "DELETE", Endpoint.ANY_DOCUMENTS.path(document_id), self._id_arguments(document_id)
        )

    async def delete_any_document_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "DELETE", Endpoint.ANY_DOCUMENTS.path(document_id), self._id_arguments(document_id)
        )
