"""
Schemas - Hierarchy Models

Typed tree produced by decoding a hierarchy document.
"""

from pydantic import BaseModel, Field
from typing import Iterator, List


class HierarchyNode(BaseModel):
    """Page or space in the remote hierarchy."""
    identifier: str = Field(min_length=1)
    children: List["HierarchyNode"] = []

    def walk(self) -> Iterator["HierarchyNode"]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


# Allow recursive model
HierarchyNode.model_rebuild()
