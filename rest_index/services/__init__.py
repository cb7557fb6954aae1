"""
Services Module - Business Logic Layer

Provides index building and resource loading.
"""

from rest_index.services.index_service import IndexService
from rest_index.services.resource_loader import ResourceLoader

__all__ = [
    "IndexService",
    "ResourceLoader",
]
