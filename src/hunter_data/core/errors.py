"""Error taxonomy for the scraping pipeline.

Every error here is fatal for the current run: nothing retries or salvages
partial results. Each one carries the URI (or ability id) that failed so
the flow log points at the offending page.
"""

from __future__ import annotations

from typing import Optional


class HunterDataError(Exception):
    """Base class for all pipeline errors."""


class FetchError(HunterDataError):
    """Network call did not return HTTP 200 (or never completed)."""

    def __init__(self, uri: str, status: Optional[int] = None, reason: str = ""):
        self.uri = uri
        self.status = status
        detail = f"got status: {status}" if status is not None else reason
        super().__init__(f"Unable to download data from: {uri}, {detail}")


class CacheReadError(HunterDataError):
    def __init__(self, uri: str, path: str):
        self.uri = uri
        self.path = path
        super().__init__(f"Unable to read cached data for: {uri}, from: {path}")


class CacheWriteError(HunterDataError):
    def __init__(self, uri: str, path: str):
        self.uri = uri
        self.path = path
        super().__init__(f"Unable to write cached data for: {uri}, to: {path}")


class ExtractionError(HunterDataError):
    """An expected marker was missing from a page or its JSON would not decode."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class ArtifactWriteError(HunterDataError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to write hunter data artifact to: {path}")
