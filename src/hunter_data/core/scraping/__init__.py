"""Core scraping primitives exported for reuse across extractors and flows.

This package contains small, well-tested building blocks: CacheStore,
Fetcher, CachedDownloader, text normalizers and HTML helpers.
"""

from .cache import CacheStore
from .downloader import CachedDownloader
from .fetcher import Fetcher
from .normalizer import camel_case, snake_case, trim
from .parser import inner_html, replace_line_breaks, slice_between, strip_elements

__all__ = [
    "CacheStore",
    "CachedDownloader",
    "Fetcher",
    "camel_case",
    "snake_case",
    "trim",
    "inner_html",
    "replace_line_breaks",
    "slice_between",
    "strip_elements",
]
