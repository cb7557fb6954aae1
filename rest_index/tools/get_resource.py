"""
MCP Tool - get_resource

Resolve a single page name to its URI and breadcrumbs.
"""

from typing import Optional
import logging

from rest_index.errors import ResourceIndexError
from rest_index.services import IndexService, ResourceLoader


logger = logging.getLogger(__name__)


async def get_resource(name: str, root_path: Optional[str] = None) -> dict:
    """
    Look up where a page lives.
    
    Args:
        name: Short page name
        root_path: REST pages URI of the space (default: configured root)
        
    Returns:
        Page URI and breadcrumbs, or an error payload
    """
    service = IndexService()
    
    try:
        loader = ResourceLoader(await service.build_index(root_path), service.fetcher)
        resource = loader.resolve(name)
    except ResourceIndexError as e:
        logger.error(f"Could not resolve {name}: {e}")
        return {"error": str(e)}
    
    return {"name": name, **resource.to_dict()}
