from pathlib import Path

import pytest

from property_feed.core.config import get_settings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def feed_xml() -> str:
    return (FIXTURES / "agents_society_feed.xml").read_text(encoding="utf-8")
