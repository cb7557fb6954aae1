"""
Services - Index Service

Fetches hierarchy documents and turns them into resource indexes.
"""

from typing import Dict, Optional
import logging

from rest_index.config import get_settings
from rest_index.pipeline.fetcher import HierarchyFetcher
from rest_index.pipeline.indexer import ResourceIndexer
from rest_index.schemas.resource import IndexerConfig, Resource


logger = logging.getLogger(__name__)


class IndexService:
    """Builds resource indexes for REST root paths."""
    
    def __init__(self, settings=None, fetcher: Optional[HierarchyFetcher] = None):
        self.settings = settings or get_settings()
        self.fetcher = fetcher or HierarchyFetcher(self.settings)
        self.indexer = ResourceIndexer(IndexerConfig.from_settings(self.settings))
    
    async def build_index(self, root_path: Optional[str] = None) -> Dict[str, Resource]:
        """
        Fetch the hierarchy under a root path and index it.
        
        Args:
            root_path: REST root path (default: from settings)
            
        Returns:
            Mapping of page identifier to Resource
        """
        root = (root_path or self.settings.rest.root_path).rstrip("/")
        logger.info(f"Fetching hierarchy from {root}")
        
        entity = await self.fetcher.fetch_hierarchy(root)
        return self.index_entity(root, entity)
    
    def index_entity(self, root_path: str, entity: str) -> Dict[str, Resource]:
        """Index an already-fetched hierarchy document."""
        index = self.indexer.index_resources(root_path, entity)
        logger.info(f"Indexed {len(index)} resources under {root_path}")
        return index
