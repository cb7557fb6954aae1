"""
Pipeline - Hierarchy Decoder

Decodes a serialized hierarchy document into HierarchyNode trees.
"""

import json
from typing import Any, List, Protocol, Tuple

from rest_index.errors import HierarchyDecodeError
from rest_index.schemas.hierarchy import HierarchyNode


class HierarchyDecoder(Protocol):
    """Anything that turns raw entity text into top-level nodes."""

    def decode(self, entity: str) -> List[HierarchyNode]:
        ...


class JsonHierarchyDecoder:
    """Decodes XWiki-style JSON page hierarchies."""
    
    def __init__(
        self,
        identifier_key: str = "name",
        children_key: str = "pageSummaries",
    ):
        self.identifier_key = identifier_key
        self.children_key = children_key
    
    def decode(self, entity: str) -> List[HierarchyNode]:
        """
        Decode a JSON hierarchy document.
        
        The top level is either an object holding the top-level nodes
        under the children key, or an array of nodes.
        
        Args:
            entity: Raw JSON text
            
        Returns:
            Top-level nodes in document order
            
        Raises:
            HierarchyDecodeError: Malformed JSON or unsupported node shape
        """
        try:
            data = json.loads(entity)
        except RecursionError as e:
            raise HierarchyDecodeError("Document is nested too deeply to parse") from e
        except (TypeError, ValueError) as e:
            raise HierarchyDecodeError(f"Malformed JSON: {e}") from e
        
        if isinstance(data, list):
            return self._decode_tree(data, "$")
        if isinstance(data, dict):
            return self._decode_tree(self._children_of(data, "$"), f"$.{self.children_key}")
        
        raise HierarchyDecodeError(
            f"Expected object or array, got {type(data).__name__}"
        )
    
    def _decode_tree(self, items: List[Any], path: str) -> List[HierarchyNode]:
        roots: List[HierarchyNode] = []
        # (raw item, json path, list the decoded node is appended to)
        stack: List[Tuple[Any, str, List[HierarchyNode]]] = [
            (item, f"{path}[{i}]", roots)
            for i, item in reversed(list(enumerate(items)))
        ]
        
        while stack:
            item, item_path, siblings = stack.pop()
            node = self._decode_node(item, item_path)
            siblings.append(node)
            
            children = self._children_of(item, item_path)
            children_path = f"{item_path}.{self.children_key}"
            stack.extend(
                (child, f"{children_path}[{i}]", node.children)
                for i, child in reversed(list(enumerate(children)))
            )
        
        return roots
    
    def _children_of(self, data: dict, path: str) -> List[Any]:
        children = data.get(self.children_key)
        if children is None:
            return []
        
        if not isinstance(children, list):
            raise HierarchyDecodeError(
                f"'{self.children_key}' must be an array, "
                f"got {type(children).__name__}",
                f"{path}.{self.children_key}",
            )
        
        return children
    
    def _decode_node(self, item: Any, path: str) -> HierarchyNode:
        if not isinstance(item, dict):
            raise HierarchyDecodeError(
                f"Node must be an object, got {type(item).__name__}", path
            )
        
        identifier = item.get(self.identifier_key)
        if not isinstance(identifier, str) or not identifier:
            raise HierarchyDecodeError(
                f"Node is missing a non-empty '{self.identifier_key}'", path
            )
        
        return HierarchyNode(identifier=identifier)
