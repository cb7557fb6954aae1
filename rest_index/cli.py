"""
REST Resource Index - CLI

Build and print the resource index for a REST root path.
"""

import asyncio
import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from rest_index.config import get_settings
from rest_index.errors import ResourceIndexError
from rest_index.schemas.resource import Resource
from rest_index.services import IndexService


logger = logging.getLogger(__name__)


def _render(index: Dict[str, Resource], output: str) -> str:
    if output == "json":
        return json.dumps(
            {name: resource.to_dict() for name, resource in index.items()},
            indent=2,
        )
    
    return "\n".join(
        f"{name}\t{resource.uri}\t{resource.breadcrumbs or '/'}"
        for name, resource in sorted(index.items())
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="REST Resource Index")
    parser.add_argument(
        "--root-path",
        type=str,
        help="REST pages URI to index (default: from env)",
    )
    parser.add_argument(
        "--entity-file",
        type=Path,
        help="Read the hierarchy document from a file instead of fetching it",
    )
    parser.add_argument(
        "--name",
        type=str,
        help="Only print the resource with this name",
    )
    parser.add_argument(
        "--output",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )
    
    args = parser.parse_args(argv)
    
    settings = get_settings()
    logging.basicConfig(level=settings.log.level)
    
    service = IndexService(settings)
    root_path = (args.root_path or settings.rest.root_path).rstrip("/")
    
    try:
        if args.entity_file:
            entity = args.entity_file.read_text(encoding="utf-8")
            index = service.index_entity(root_path, entity)
        else:
            index = asyncio.run(service.build_index(root_path))
    except (ResourceIndexError, OSError) as e:
        logger.error(f"Indexing failed: {e}")
        return 1
    
    if args.name:
        if args.name not in index:
            logger.error(f"Unknown resource: {args.name}")
            return 2
        index = {args.name: index[args.name]}
    
    print(_render(index, args.output))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
