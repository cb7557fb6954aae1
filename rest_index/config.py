"""
REST Resource Index - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal


class RestSettings(BaseSettings):
    """REST endpoint configuration."""
    root_path: str = Field(
        "http://localhost:8080/xwiki/rest/wikis/xwiki/spaces/Main/pages",
        alias="REST_ROOT_PATH",
    )
    username: Optional[str] = Field(None, alias="REST_USERNAME")
    password: Optional[str] = Field(None, alias="REST_PASSWORD")
    timeout_seconds: float = Field(30.0, alias="REST_TIMEOUT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class IndexSettings(BaseSettings):
    """Hierarchy decoding and indexing configuration."""
    identifier_key: str = Field("name", alias="INDEX_IDENTIFIER_KEY")
    children_key: str = Field("pageSummaries", alias="INDEX_CHILDREN_KEY")
    root_breadcrumb: str = Field("", alias="INDEX_ROOT_BREADCRUMB")
    collision_policy: Literal["overwrite", "error"] = Field(
        "overwrite", alias="INDEX_COLLISION_POLICY"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class CacheSettings(BaseSettings):
    """Resource content caching configuration."""
    enabled: bool = Field(True, alias="CACHE_ENABLED")
    ttl_content: int = Field(900, alias="CACHE_TTL_CONTENT_SECONDS")
    max_entries: int = Field(500, alias="CACHE_MAX_ENTRIES")

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    rest: RestSettings = Field(default_factory=RestSettings)
    index: IndexSettings = Field(default_factory=IndexSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
