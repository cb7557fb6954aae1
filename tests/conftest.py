"""
Shared test fixtures.
"""

from pathlib import Path

import pytest

from rest_index.config import Settings, RestSettings, CacheSettings


FIXTURES_DIR = Path(__file__).parent / "fixtures"
XWIKI_ROOT = "http://localhost:8080/xwiki/rest/wikis/xwiki/spaces/Main/pages"


@pytest.fixture
def xwiki_root() -> str:
    return XWIKI_ROOT


@pytest.fixture
def xwiki_entity() -> str:
    return (FIXTURES_DIR / "xwiki-index.json").read_text(encoding="utf-8")


@pytest.fixture
def xwiki_entity_path() -> Path:
    return FIXTURES_DIR / "xwiki-index.json"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        rest=RestSettings(REST_ROOT_PATH=XWIKI_ROOT),
        cache=CacheSettings(CACHE_ENABLED=True),
    )
