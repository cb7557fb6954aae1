"""
MCP Tool - load_resource

Fetch the content of a page by name.
"""

from typing import Optional
import logging

from rest_index.errors import ResourceIndexError
from rest_index.services import IndexService, ResourceLoader


logger = logging.getLogger(__name__)


async def load_resource(name: str, root_path: Optional[str] = None) -> dict:
    """
    Load a page's content from the wiki.
    
    Args:
        name: Short page name
        root_path: REST pages URI of the space (default: configured root)
        
    Returns:
        Page URI, breadcrumbs and raw content, or an error payload
    """
    service = IndexService()
    
    try:
        loader = ResourceLoader(await service.build_index(root_path), service.fetcher)
        resource = loader.resolve(name)
        content = await loader.load_resource_as_text(name)
    except ResourceIndexError as e:
        logger.error(f"Could not load {name}: {e}")
        return {"error": str(e)}
    
    return {"name": name, **resource.to_dict(), "content": content}
