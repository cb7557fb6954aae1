"""
REST Resource Index - MCP Server

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
from fastmcp import FastMCP

from rest_index.config import get_settings
from rest_index.tools import (
    index_resources,
    get_resource,
    load_resource,
)


def create_app() -> FastMCP:
    """Create and configure the MCP application."""
    mcp = FastMCP(
        name="rest-index",
        instructions="Resolve wiki page names to REST URIs and breadcrumbs",
    )
    
    # Register all tools
    mcp.tool()(index_resources.index_resources)
    mcp.tool()(get_resource.get_resource)
    mcp.tool()(load_resource.load_resource)
    
    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="REST Resource Index MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    args = parser.parse_args()
    
    settings = get_settings()
    logging.basicConfig(level=settings.log.level)
    
    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port
    
    mcp = create_app()
    
    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
