"""
Schemas Module - Pydantic Models

Data models for resources, hierarchy nodes and indexer configuration.
"""

from rest_index.schemas.resource import Resource, IndexerConfig
from rest_index.schemas.hierarchy import HierarchyNode

__all__ = [
    "Resource",
    "IndexerConfig",
    "HierarchyNode",
]
