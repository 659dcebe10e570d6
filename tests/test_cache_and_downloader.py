import pytest
import requests

from conftest import FakeFetcher
from hunter_data.core.errors import CacheReadError, CacheWriteError, FetchError
from hunter_data.core.scraping.cache import CacheStore
from hunter_data.core.scraping.downloader import CachedDownloader
from hunter_data.core.scraping.fetcher import Fetcher

URI = "http://www.wowhead.com/spell=883"


class DummyResponse:
    def __init__(self, status_code: int, content: bytes = b""):
        self.status_code = status_code
        self.content = content


class FakeClock:
    def __init__(self):
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_cache_path_uses_snake_case(tmp_path):
    cache = CacheStore(tmp_path, ".html")
    assert cache.path_for(URI) == tmp_path / "httpwwwwowheadcomspell883.html"


def test_cache_write_then_read(tmp_path):
    cache = CacheStore(tmp_path / "cache")
    assert not cache.is_cached(URI)
    cache.write(URI, b"<html>883</html>")
    assert cache.is_cached(URI)
    assert cache.read(URI) == b"<html>883</html>"
    # no temporary files left behind
    assert [p.name for p in (tmp_path / "cache").iterdir()] == [
        "httpwwwwowheadcomspell883.html"
    ]


def test_cache_read_failure_raises(tmp_path, monkeypatch):
    cache = CacheStore(tmp_path)
    cache.write(URI, b"x")

    def boom(self):
        raise PermissionError("denied")

    monkeypatch.setattr("pathlib.Path.read_bytes", boom)
    with pytest.raises(CacheReadError):
        cache.read(URI)


def test_cache_write_failure_raises(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file")
    cache = CacheStore(blocker)
    with pytest.raises(CacheWriteError):
        cache.write(URI, b"x")


def test_cached_uri_does_not_hit_network(tmp_path):
    cache = CacheStore(tmp_path)
    cache.write(URI, b"cached body")
    fetcher = FakeFetcher({URI: b"network body"})
    downloader = CachedDownloader(cache, fetcher, request_delay=0)

    assert downloader.fetch(URI) == b"cached body"
    assert fetcher.calls == []
    assert downloader.cache_hits == 1


def test_uncached_uri_is_written_before_returning(tmp_path):
    cache = CacheStore(tmp_path)
    fetcher = FakeFetcher({URI: b"network body"})
    downloader = CachedDownloader(cache, fetcher, request_delay=0)

    assert downloader.fetch(URI) == b"network body"
    assert cache.read(URI) == b"network body"
    assert downloader.fetch(URI) == b"network body"
    assert fetcher.calls == [URI]
    assert downloader.network_fetches == 1
    assert downloader.cache_hits == 1


def test_failed_fetch_is_not_cached(tmp_path):
    cache = CacheStore(tmp_path)
    downloader = CachedDownloader(cache, FakeFetcher({}), request_delay=0)
    with pytest.raises(FetchError):
        downloader.fetch(URI)
    assert not cache.is_cached(URI)


def test_pacing_only_applies_to_network_calls(tmp_path):
    clock = FakeClock()
    cache = CacheStore(tmp_path)
    cache.write("http://cached", b"hit")
    fetcher = FakeFetcher({"http://a": b"a", "http://b": b"b"})
    downloader = CachedDownloader(
        cache, fetcher, request_delay=1.0, clock=clock, sleep=clock.sleep
    )

    downloader.fetch("http://cached", paced=True)
    assert clock.sleeps == []

    downloader.fetch("http://a", paced=True)
    clock.now += 0.25
    downloader.fetch("http://b", paced=True)
    assert clock.sleeps == [1.0, 0.75]


def test_unpaced_fetch_does_not_sleep(tmp_path):
    clock = FakeClock()
    downloader = CachedDownloader(
        CacheStore(tmp_path),
        FakeFetcher({URI: b"x"}),
        request_delay=5.0,
        clock=clock,
        sleep=clock.sleep,
    )
    downloader.fetch(URI)
    assert clock.sleeps == []


def test_fetcher_accepts_only_status_200(monkeypatch):
    f = Fetcher()
    monkeypatch.setattr(f, "get", lambda url, headers=None: DummyResponse(200, b"ok"))
    assert f.fetch(URI) == b"ok"

    monkeypatch.setattr(f, "get", lambda url, headers=None: DummyResponse(304))
    with pytest.raises(FetchError) as excinfo:
        f.fetch(URI)
    assert excinfo.value.status == 304
    assert URI in str(excinfo.value)


def test_fetcher_wraps_transport_errors(monkeypatch):
    f = Fetcher()

    def raise_conn(url, headers=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(f, "get", raise_conn)
    with pytest.raises(FetchError):
        f.fetch(URI)
