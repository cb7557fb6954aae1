"""
Schemas - Resource Models

Pydantic models for indexed resources and indexer configuration.
"""

from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Literal


class Resource(BaseModel):
    """Access URI and breadcrumb trail of a single indexed page."""
    uri: str
    breadcrumbs: str

    model_config = ConfigDict(frozen=True)

    def get_uri(self) -> str:
        return self.uri

    def get_breadcrumbs(self) -> str:
        return self.breadcrumbs

    @property
    def breadcrumb_trail(self) -> List[str]:
        """Ancestor identifiers, root first."""
        return [part for part in self.breadcrumbs.split("/") if part]

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump()


class IndexerConfig(BaseModel):
    """
    Immutable indexing options.

    identifier_key and children_key name the fields that carry a node's
    identifier and its child nodes in the hierarchy document.
    """
    identifier_key: str = "name"
    children_key: str = "pageSummaries"
    root_breadcrumb: str = ""
    collision_policy: Literal["overwrite", "error"] = "overwrite"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings) -> "IndexerConfig":
        """Build config from the index section of application settings."""
        return cls(
            identifier_key=settings.index.identifier_key,
            children_key=settings.index.children_key,
            root_breadcrumb=settings.index.root_breadcrumb,
            collision_policy=settings.index.collision_policy,
        )
