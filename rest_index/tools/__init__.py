"""
Tools Module - MCP Tool Implementations

MCP tools for resolving wiki pages through the resource index.
"""

from rest_index.tools import index_resources
from rest_index.tools import get_resource
from rest_index.tools import load_resource

__all__ = [
    "index_resources",
    "get_resource",
    "load_resource",
]
