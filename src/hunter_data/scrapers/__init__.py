"""Registry and helper to select a page scraper plugin by domain.

Simplest form: map known domains to a PageScraper class, exact match first,
then suffix match.
"""

from typing import Type
from urllib.parse import urlparse

from .base_scraper import PageScraper
from .wowhead_scraper import WowheadScraper

_REGISTRY: dict[str, Type[PageScraper]] = {
    "www.wowhead.com": WowheadScraper,
    "wowhead.com": WowheadScraper,
}


def get_scraper_for_url(url: str) -> Type[PageScraper]:
    domain = urlparse(url).netloc.lower()
    if domain in _REGISTRY:
        return _REGISTRY[domain]
    for key in _REGISTRY:
        if domain.endswith("." + key):
            return _REGISTRY[key]
    raise ValueError(f"No page scraper registered for domain '{domain}'")


__all__ = ["get_scraper_for_url", "PageScraper", "WowheadScraper"]
