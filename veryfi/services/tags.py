"""Document tags."""

from veryfi.constants import Endpoint
from veryfi.network import NetworkClient


class TagServices(NetworkClient):
    """Replace or extend the tags of a receipt or invoice."""

    def replace_tags(self, document_id: str | int, tags: list[str]) -> str:
        """Overwrite all tags of the document with the given list."""
        return self._request("PUT", Endpoint.DOCUMENTS.path(document_id), {"tags": list(tags)})

    async def replace_tags_async(self, document_id: str | int, tags: list[str]) -> str:
        return await self._request_async("PUT", Endpoint.DOCUMENTS.path(document_id), {"tags": list(tags)})

    def add_tags(self, document_id: str | int, tags: list[str]) -> str:
        """Add tags, keeping the ones already on the document."""
        return self._request("POST", f"{Endpoint.DOCUMENTS.path(document_id)}tags/", {"tags": list(tags)})

    async def add_tags_async(self, document_id: str | int, tags: list[str]) -> str:
        return await self._request_async(
            "POST", f"{Endpoint.DOCUMENTS.path(document_id)}tags/", {"tags": list(tags)}
        )
