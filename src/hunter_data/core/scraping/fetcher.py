"""HTTP fetcher with timeout, optional retries and UA rotation.

Provides a small `Fetcher` object exposing `get` and `fetch`.
"""

from __future__ import annotations

import random
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from hunter_data.core.errors import FetchError

DEFAULT_UA_POOL = [
    "Mozilla/5.0 (compatible; HunterDataBot/1.0; +https://example.org/bot)",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
]


class Fetcher:
    """Small HTTP client with sensible defaults for scraping.

    Usage:
        f = Fetcher(timeout=15)
        body = f.fetch(url)

    `retries` defaults to 0: a failed page halts the run instead of being
    retried behind the caller's back.
    """

    def __init__(
        self,
        timeout: int = 15,
        retries: int = 0,
        backoff_factor: float = 0.3,
        ua_pool: Optional[list[str]] = None,
    ) -> None:
        self.timeout = timeout
        self.session = requests.Session()
        retry = Retry(
            total=retries,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset(["GET"]),
            backoff_factor=backoff_factor,
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.ua_pool = ua_pool or DEFAULT_UA_POOL

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": random.choice(self.ua_pool)}
        if headers:
            base.update(headers)
        return base

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        return self.session.get(
            url, headers=self._headers(headers), timeout=self.timeout, **kwargs
        )

    def fetch(self, url: str, headers: Optional[Dict[str, str]] = None) -> bytes:
        """Return the body of `url`; anything but HTTP 200 raises `FetchError`."""
        try:
            resp = self.get(url, headers=headers)
        except requests.RequestException as exc:
            raise FetchError(url, reason=str(exc)) from exc
        if resp.status_code != 200:
            raise FetchError(url, status=resp.status_code)
        return resp.content
