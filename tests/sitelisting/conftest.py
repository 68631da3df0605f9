from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

from sitelisting.listing import Listing, ListingItem
from sitelisting.settings import ListingSettings, reset_settings


# ===========================================================================================
# HOOKS
# ===========================================================================================

@pytest.fixture(autouse=True, scope="function")
def around_function(monkeypatch):
    """Isolate each test from SITELISTING_* variables and the cached settings singleton."""
    monkeypatch.delenv("SITELISTING_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SITELISTING_CONTENT_SELECTOR", raising=False)
    monkeypatch.delenv("SITELISTING_DEFAULT_ROW_COUNT", raising=False)
    monkeypatch.delenv("SITELISTING_RESOURCES_PATH", raising=False)
    reset_settings()

    yield # execution of the test function

    reset_settings()


# ===========================================================================================
# FIXTURES
# ===========================================================================================

class FakeRenderer:
    """TemplateRenderer that records its calls instead of rendering a template file."""

    def __init__(self):
        self.calls: List[Tuple[Path, Dict[str, Any], bool]] = []

    def render(self, template_path: Path, data: Dict[str, Any], escape: bool) -> str:
        self.calls.append((template_path, data, escape))
        titles = ", ".join(str(item.get("title")) for item in data["items"])
        return f"::: {{.list}}\n{titles}\n:::\n"


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def settings(tmp_path) -> ListingSettings:
    return ListingSettings(resources_path=tmp_path)


@pytest.fixture
def table_listing() -> Listing:
    return Listing.model_validate({
        "id": "listing-posts",
        "type": "table",
        "columns": ["title", "date", "tags"],
        "column-types": {"date": "date"},
        "column-links": ["title"],
    })


@pytest.fixture
def grid_listing() -> Listing:
    return Listing.model_validate({
        "id": "listing-cards",
        "type": "grid",
        "columns": ["title", "reading-time"],
        "column-types": {"reading-time": "number"},
        "column-count": 5,
        "row-count": 4,
        "classes": ["quarto-grid"],
    })


@pytest.fixture
def post_item() -> ListingItem:
    return ListingItem.model_validate({
        "title": "Hello World",
        "path": "posts/hello.html",
        "tags": "intro",
        "date": datetime(2021, 1, 1, tzinfo=timezone.utc),
        "filemodified": datetime(2021, 1, 2, 13, 45, tzinfo=timezone.utc),
        "author": ["Ada Lovelace", "Grace Hopper"],
        "description": "The quick brown fox jumps over the lazy dog",
    })
