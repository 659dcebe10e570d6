from pathlib import Path

import pytest

from hunter_data.core.errors import FetchError

FIXTURES = Path(__file__).parent / "fixtures"

LISTING_URL = "http://www.wowhead.com/hunter-pet-abilities/live-only:on"
SPELL_URL = "http://www.wowhead.com/spell="


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeFetcher:
    """Stands in for `Fetcher`: serves canned pages and counts calls."""

    def __init__(self, pages: dict[str, bytes]):
        self.pages = pages
        self.calls: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.calls.append(url)
        if url not in self.pages:
            raise FetchError(url, status=404)
        return self.pages[url]


@pytest.fixture
def wowhead_pages() -> dict[str, bytes]:
    pages = {LISTING_URL: (FIXTURES / "hunter_pet_abilities.html").read_bytes()}
    for ability_id in ("883", "160011", "159788"):
        pages[SPELL_URL + ability_id] = (
            FIXTURES / f"spell_{ability_id}.html"
        ).read_bytes()
    return pages


@pytest.fixture
def fake_fetcher(wowhead_pages) -> FakeFetcher:
    return FakeFetcher(wowhead_pages)
