"""Document classification: /partner/classify/."""

from pathlib import Path

from veryfi.constants import Endpoint
from veryfi.files import add_file_path_to_parameters, add_file_to_parameters, add_url_to_parameters
from veryfi.network import NetworkClient


class ClassifyServices(NetworkClient):
    """
    Classify a document without extracting it.

    Pass {"document_types": [...]} in parameters to restrict the candidate
    types.
    """

    def classify_document(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return self._request("POST", Endpoint.CLASSIFY.path(), arguments)

    async def classify_document_async(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return await self._request_async("POST", Endpoint.CLASSIFY.path(), arguments)

    def classify_document_base64(self, file_name: str, file_data: str, parameters: dict | None = None) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return self._request("POST", Endpoint.CLASSIFY.path(), arguments)

    async def classify_document_base64_async(
        self, file_name: str, file_data: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return await self._request_async("POST", Endpoint.CLASSIFY.path(), arguments)

    def classify_document_url(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return self._request("POST", Endpoint.CLASSIFY.path(), arguments)

    async def classify_document_url_async(
        self,
        file_url: str | None = None,
        file_urls: list[str] | None = None,
        parameters: dict | None = None,
    ) -> str:
        arguments = add_url_to_parameters(file_url, file_urls, parameters)
        return await self._request_async("POST", Endpoint.CLASSIFY.path(), arguments)
