"""
Pipeline Module - Indexing Pipeline

Handles the flow from the REST endpoint to a resource index:
Fetch → Decode → Index
"""

from rest_index.pipeline.decoder import HierarchyDecoder, JsonHierarchyDecoder
from rest_index.pipeline.fetcher import HierarchyFetcher
from rest_index.pipeline.indexer import ResourceIndexer

__all__ = [
    "HierarchyDecoder",
    "JsonHierarchyDecoder",
    "HierarchyFetcher",
    "ResourceIndexer",
]
