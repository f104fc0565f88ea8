"""Contracts: /partner/contracts/."""

from pathlib import Path

from veryfi.constants import Endpoint
from veryfi.files import add_file_path_to_parameters, add_file_to_parameters, add_url_to_parameters
from veryfi.network import NetworkClient


class ContractServices(NetworkClient):
    """API operations for contracts. Listing has no bounding box or confidence flags."""

    def get_contracts(self, page: int = 1, page_size: int = 50, parameters: dict | None = None) -> str:
        arguments = self._list_arguments(page, page_size, parameters=parameters)
        return self._request("GET", Endpoint.CONTRACTS.path(), arguments)

    async def get_contracts_async(
        self, page: int = 1, page_size: int = 50, parameters: dict | None = None
    ) -> str:
        arguments = self._list_arguments(page, page_size, parameters=parameters)
        return await self._request_async("GET", Endpoint.CONTRACTS.path(), arguments)

    def get_contract(self, document_id: str | int) -> str:
        return self._request("GET", Endpoint.CONTRACTS.path(document_id), self._id_arguments(document_id))

    async def get_contract_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "GET", Endpoint.CONTRACTS.path(document_id), self._id_arguments(document_id)
        )

    def process_contract(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return self._request("POST", Endpoint.CONTRACTS.path(), arguments)

    async def process_contract_async(self, file_path: str | Path, parameters: dict | None = None) -> str:
        arguments = add_file_path_to_parameters(file_path, parameters)
        return await self._request_async("POST", Endpoint.CONTRACTS.path(), arguments)

    def process_contract_base64(self, file_name: str, file_data: str, parameters: dict | None = None) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return self._request("POST", Endpoint.CONTRACTS.path(), arguments)

    async def process_contract_base64_async(
        self, file_name: str, file_data: str, parameters: dict | None = None
    ) -> str:
        arguments = add_file_to_parameters(file_name, file_data, parameters)
        return await self._request_async("POST", Endpoint.CONTRACTS.path(), arguments)

    def process_contract_url(self, file_url: str, parameters: dict | None = None) -> str:
        """Process a contract from a URL. Only a single URL is accepted."""
        arguments = add_url_to_parameters(file_url, None, parameters)
        return self._request("POST", Endpoint.CONTRACTS.path(), arguments)

    async def process_contract_url_async(self, file_url: str, parameters: dict | None = None) -> str:
        arguments = add_url_to_parameters(file_url, None, parameters)
        return await self._request_async("POST", Endpoint.CONTRACTS.path(), arguments)

    def delete_contract(self, document_id: str | int) -> str:
        return self._request("DELETE", Endpoint.CONTRACTS.path(document_id), self._id_arguments(document_id))

    async def delete_contract_async(self, document_id: str | int) -> str:
        return await self._request_async(
            "DELETE", Endpoint.CONTRACTS.path(document_id), self._id_arguments(document_id)
        )
