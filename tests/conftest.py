import os
import sys
from typing import Any, List, Optional

import pytest

# Ensure src/ is importable when tests run from project root
HERE = os.path.dirname(__file__)
SRC = os.path.abspath(os.path.join(HERE, "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)


_NO_BODY = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = _NO_BODY):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        if self._payload is _NO_BODY:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    """Stands in for `requests.Session`; replies are consumed in order."""

    def __init__(self) -> None:
        self.calls: List[dict] = []
        self._replies: List[Any] = []

    def reply(self, status_code: int = 200, payload: Any = _NO_BODY) -> "FakeSession":
        self._replies.append(FakeResponse(status_code, payload))
        return self

    def raise_error(self, exc: Exception) -> "FakeSession":
        self._replies.append(exc)
        return self

    def request(self, method: str, url: str, headers: Optional[dict] = None, timeout: Any = None, **kwargs: Any):
        self.calls.append({"method": method, "url": url, "headers": headers, "timeout": timeout, **kwargs})
        if not self._replies:
            raise AssertionError(f"Unexpected request: {method} {url}")
        nxt = self._replies.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_movies() -> List[dict]:
    return [
        {"id": 1, "title": "Dune", "year": 2021, "genre": "Sci-Fi"},
        {"id": 2, "title": "Amelie", "year": 2001, "genre": "Romance"},
    ]


@pytest.fixture
def api(fake_session):
    from movies_api import MoviesAPI

    return MoviesAPI("http://localhost:3000/movies/", timeout=5, session=fake_session)
