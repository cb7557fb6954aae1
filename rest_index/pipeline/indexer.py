"""
Pipeline - Resource Indexer

Walks a page hierarchy and builds the identifier to Resource index.
"""

from typing import Dict, List, Optional, Tuple

from rest_index.errors import DuplicateResourceError
from rest_index.pipeline.decoder import HierarchyDecoder, JsonHierarchyDecoder
from rest_index.schemas.hierarchy import HierarchyNode
from rest_index.schemas.resource import IndexerConfig, Resource


class ResourceIndexer:
    """
    Builds flat resource indexes from hierarchy documents.
    
    Every page is addressed directly under the root path; only the
    breadcrumbs record where it sits in the tree. The indexer keeps no
    state between calls.
    """
    
    def __init__(
        self,
        config: Optional[IndexerConfig] = None,
        decoder: Optional[HierarchyDecoder] = None,
    ):
        self.config = config or IndexerConfig()
        self.decoder = decoder or JsonHierarchyDecoder(
            identifier_key=self.config.identifier_key,
            children_key=self.config.children_key,
        )
    
    def index_resources(self, root_path: str, entity: str) -> Dict[str, Resource]:
        """
        Decode a hierarchy document and index every page in it.
        
        Args:
            root_path: URI prefix, without trailing slash
            entity: Serialized hierarchy document
            
        Returns:
            Mapping of page identifier to Resource
            
        Raises:
            HierarchyDecodeError: Entity could not be decoded
            DuplicateResourceError: Identifier collision with policy "error"
        """
        return self.index_nodes(root_path, self.decoder.decode(entity))
    
    def index_nodes(
        self,
        root_path: str,
        nodes: List[HierarchyNode],
    ) -> Dict[str, Resource]:
        """Index already-decoded top-level nodes."""
        index: Dict[str, Resource] = {}
        stack: List[Tuple[HierarchyNode, str]] = [
            (node, self.config.root_breadcrumb) for node in reversed(nodes)
        ]
        
        # Pre-order, siblings in document order
        while stack:
            node, breadcrumbs = stack.pop()
            resource = Resource(
                uri=f"{root_path}/{node.identifier}",
                breadcrumbs=breadcrumbs,
            )
            self._store(index, node.identifier, resource)
            
            child_breadcrumbs = f"{breadcrumbs}/{node.identifier}"
            stack.extend(
                (child, child_breadcrumbs) for child in reversed(node.children)
            )
        
        return index
    
    def _store(self, index: Dict[str, Resource], identifier: str, resource: Resource) -> None:
        existing = index.get(identifier)
        if existing is not None and self.config.collision_policy == "error":
            raise DuplicateResourceError(
                identifier, existing.breadcrumbs, resource.breadcrumbs
            )
        # Last write wins
        index[identifier] = resource
