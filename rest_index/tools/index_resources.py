"""
MCP Tool - index_resources

Index every page under a REST root path.
"""

from typing import Optional
import logging

from rest_index.errors import ResourceIndexError
from rest_index.services import IndexService


logger = logging.getLogger(__name__)


async def index_resources(root_path: Optional[str] = None) -> dict:
    """
    Build the resource index for a wiki space.
    
    Args:
        root_path: REST pages URI of the space (default: configured root)
        
    Returns:
        Mapping of page name to its URI and breadcrumbs
    """
    service = IndexService()
    
    try:
        index = await service.build_index(root_path)
    except ResourceIndexError as e:
        logger.error(f"Indexing failed: {e}")
        return {"error": str(e)}
    
    return {name: resource.to_dict() for name, resource in index.items()}
