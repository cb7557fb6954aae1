"""
REST Resource Index

Flat identifier to Resource indexes over REST-hosted page hierarchies.
"""

from rest_index.errors import (
    ResourceIndexError,
    HierarchyDecodeError,
    DuplicateResourceError,
    FetchError,
    ResourceNotFoundError,
)
from rest_index.schemas import Resource, IndexerConfig, HierarchyNode
from rest_index.pipeline import JsonHierarchyDecoder, ResourceIndexer

__all__ = [
    "ResourceIndexError",
    "HierarchyDecodeError",
    "DuplicateResourceError",
    "FetchError",
    "ResourceNotFoundError",
    "Resource",
    "IndexerConfig",
    "HierarchyNode",
    "JsonHierarchyDecoder",
    "ResourceIndexer",
]
