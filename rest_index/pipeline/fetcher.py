"""
Pipeline - Hierarchy Fetcher

REST API retrieval of hierarchy documents and page content.
"""

import httpx
from typing import Optional

from rest_index.config import get_settings
from rest_index.errors import FetchError


class HierarchyFetcher:
    """Fetches raw documents from the REST endpoint."""
    
    def __init__(
        self,
        settings=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.timeout = self.settings.rest.timeout_seconds
        self.transport = transport
        
        username = self.settings.rest.username
        self.auth = (
            (username, self.settings.rest.password or "")
            if username
            else None
        )
    
    async def fetch(self, uri: str, media_type: str = "application/json") -> str:
        """
        GET a document and return its body text.
        
        Args:
            uri: Absolute URI to fetch
            media_type: Value for the Accept header
            
        Returns:
            Response body as text
            
        Raises:
            FetchError: Non-2xx response or transport failure
        """
        async with httpx.AsyncClient(
            auth=self.auth,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(uri, headers={"Accept": media_type})
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise FetchError(
                    uri,
                    f"HTTP {e.response.status_code}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                raise FetchError(uri, str(e) or type(e).__name__) from e
            
            return response.text
    
    async def fetch_hierarchy(self, root_path: str) -> str:
        """Fetch the hierarchy document rooted at root_path."""
        return await self.fetch(root_path)
