"""Line items of a document: /partner/documents/{id}/line-items/."""

from veryfi.constants import Endpoint
from veryfi.models import AddLineItem, UpdateLineItem
from veryfi.network import NetworkClient


def _line_items_path(document_id: str | int, line_item_id: str | int | None = None) -> str:
    path = f"{Endpoint.DOCUMENTS.path(document_id)}line-items/"
    if line_item_id is not None:
        path += str(line_item_id)
    return path


class LineItemServices(NetworkClient):
    """API operations for the line items of a receipt or invoice."""

    def get_line_items(self, document_id: str | int) -> str:
        return self._request("GET", _line_items_path(document_id))

    async def get_line_items_async(self, document_id: str | int) -> str:
        return await self._request_async("GET", _line_items_path(document_id))

    def get_line_item(self, document_id: str | int, line_item_id: str | int) -> str:
        return self._request("GET", _line_items_path(document_id, line_item_id))

    async def get_line_item_async(self, document_id: str | int, line_item_id: str | int) -> str:
        return await self._request_async("GET", _line_items_path(document_id, line_item_id))

    def add_line_item(self, document_id: str | int, payload: AddLineItem) -> str:
        """
        Add a line item to a document.

        Args:
            document_id: Id of the document
            payload: The new line item

        Returns:
            JSON response body

        Raises:
            ValidationError: If order, description or total is missing
        """
        return self._request("POST", _line_items_path(document_id), payload.to_dict())

    async def add_line_item_async(self, document_id: str | int, payload: AddLineItem) -> str:
        return await self._request_async("POST", _line_items_path(document_id), payload.to_dict())

    def update_line_item(self, document_id: str | int, line_item_id: str | int, payload: UpdateLineItem) -> str:
        """
        Update fields of an existing line item.

        Raises:
            ValidationError: If no field of the payload is set
        """
        return self._request("PUT", _line_items_path(document_id, line_item_id), payload.to_dict())

    async def update_line_item_async(
        self, document_id: str | int, line_item_id: str | int, payload: UpdateLineItem
    ) -> str:
        return await self._request_async("PUT", _line_items_path(document_id, line_item_id), payload.to_dict())

    def delete_line_items(self, document_id: str | int) -> str:
        """Delete every line item of a document."""
        return self._request("DELETE", _line_items_path(document_id))

    async def delete_line_items_async(self, document_id: str | int) -> str:
        return await self._request_async("DELETE", _line_items_path(document_id))

    def delete_line_item(self, document_id: str | int, line_item_id: str | int) -> str:
        return self._request("DELETE", _line_items_path(document_id, line_item_id))

    async def delete_line_item_async(self, document_id: str | int, line_item_id: str | int) -> str:
        return await self._request_async("DELETE", _line_items_path(document_id, line_item_id))
