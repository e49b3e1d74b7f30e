import pytest
from metasearch.models import ArticleResult, VideoResult


class FakeResponse:
    """Stands in for an aiohttp response used as an async context manager."""

    def __init__(self, status=200, payload=None, error=None):
        self.status = status
        self.payload = payload
        self.error = error

    async def json(self, content_type=None):
        if self.error is not None:
            raise self.error
        return self.payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Routes get/post calls to a handler ``(method, url, kwargs) -> FakeResponse``."""

    def __init__(self, handler):
        self.handler = handler
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        result = self.handler(method, url, kwargs)
        if isinstance(result, Exception):
            raise result
        return result

    def get(self, url, **kwargs):
        return self._request("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._request("POST", url, **kwargs)


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def video():
    def _video(views=0, likes=0, title=None):
        return VideoResult(
            title=title or f"video {views}/{likes}",
            link=f"https://www.youtube.com/watch?v={views}-{likes}",
            views=views,
            likes=likes,
        )

    return _video


@pytest.fixture
def article():
    def _article(title="article", thumbnail=None):
        return ArticleResult(
            title=title,
            link=f"https://example.com/{title.replace(' ', '-')}",
            snippet=f"About {title}",
            thumbnail=thumbnail,
        )

    return _article
