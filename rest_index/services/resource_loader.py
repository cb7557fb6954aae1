"""
Services - Resource Loader

Resolves short resource names through an index and loads their content.
"""

from typing import Dict, Optional
from cachetools import TTLCache
import threading
import logging

from rest_index.config import get_settings
from rest_index.errors import ResourceNotFoundError
from rest_index.pipeline.fetcher import HierarchyFetcher
from rest_index.schemas.resource import Resource


logger = logging.getLogger(__name__)


class ResourceLoader:
    """Loads indexed resources by name, caching fetched content by URI."""
    
    def __init__(
        self,
        index: Dict[str, Resource],
        fetcher: Optional[HierarchyFetcher] = None,
        settings=None,
    ):
        self.settings = settings or get_settings()
        self.index = index
        self.fetcher = fetcher or HierarchyFetcher(self.settings)
        self._lock = threading.Lock()
        self._content_cache = TTLCache(
            maxsize=self.settings.cache.max_entries,
            ttl=self.settings.cache.ttl_content,
        )
    
    def resolve(self, name: str) -> Resource:
        """
        Look up a resource by its short name.
        
        Raises:
            ResourceNotFoundError: Name is not in the index
        """
        resource = self.index.get(name)
        if resource is None:
            raise ResourceNotFoundError(name)
        return resource
    
    async def load_resource_as_text(self, name: str) -> str:
        """
        Fetch the content of a named resource.
        
        Args:
            name: Short resource name
            
        Returns:
            Raw content served at the resource URI
        """
        resource = self.resolve(name)
        
        cached = self._get_cached(resource.uri)
        if cached is not None:
            return cached
        
        logger.debug(f"Loading {name} from {resource.uri}")
        content = await self.fetcher.fetch(resource.uri)
        self._set_cached(resource.uri, content)
        return content
    
    def clear_cache(self) -> None:
        with self._lock:
            self._content_cache.clear()
    
    def _get_cached(self, uri: str) -> Optional[str]:
        if not self.settings.cache.enabled:
            return None
        with self._lock:
            return self._content_cache.get(uri)
    
    def _set_cached(self, uri: str, content: str) -> None:
        if not self.settings.cache.enabled:
            return
        with self._lock:
            self._content_cache[uri] = content
