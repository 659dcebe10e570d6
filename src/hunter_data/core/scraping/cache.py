"""On-disk cache of fetched pages.

One file per URI, named `snake_case(uri) + extension`, holding the raw
bytes exactly as they were downloaded. Two URIs that normalize to the same
name share a file; nothing tries to detect that.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from hunter_data.core.errors import CacheReadError, CacheWriteError
from hunter_data.core.scraping.normalizer import snake_case


class CacheStore:
    """Byte store keyed by URI.

    Usage:
        cache = CacheStore("cache")
        if not cache.is_cached(uri):
            cache.write(uri, body)
        body = cache.read(uri)
    """

    def __init__(self, directory: str | Path = "cache", extension: str = ".html"):
        self.directory = Path(directory)
        self.extension = extension

    def path_for(self, uri: str) -> Path:
        return self.directory / f"{snake_case(uri)}{self.extension}"

    def is_cached(self, uri: str) -> bool:
        return self.path_for(uri).is_file()

    def read(self, uri: str) -> bytes:
        path = self.path_for(uri)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise CacheReadError(uri, str(path)) from exc

    def write(self, uri: str, data: bytes) -> Path:
        """Write `data` for `uri`.

        The bytes go to a temporary file in the cache directory first and are
        then moved over the final name, so a reader never sees a partial file.
        """
        path = self.path_for(uri)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=".partial-", suffix=self.extension
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise CacheWriteError(uri, str(path)) from exc
        return path
