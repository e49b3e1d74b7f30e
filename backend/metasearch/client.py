"""Async client for the search endpoint, plus the state a search box keeps.

``SearchSession`` mirrors what the browser UI does: keystrokes are debounced
into at most one pending search, results are kept unfiltered so the content
type filter can be changed without searching again, and any failure shows a
single generic message.
"""
from typing import Awaitable, Callable, Iterable, List, Optional
import asyncio
import logging
import aiohttp
from pydantic import TypeAdapter
from .errors import SearchError
from .models import ResultType, SearchResult

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Error fetching search results"
DEFAULT_DEBOUNCE_DELAY = 0.3

_results_adapter = TypeAdapter(List[SearchResult])


def filter_results(
    results: Iterable[SearchResult], content_type: Optional[str] = None
) -> List[SearchResult]:
    """Keep the results of one content type; empty content type keeps all."""
    if not content_type:
        return list(results)
    wanted = ResultType(content_type).value
    return [result for result in results if result.type == wanted]


class SearchClient:
    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session

    async def search(self, term: str) -> List[SearchResult]:
        if self.session is not None:
            return await self._post_search(self.session, term)
        async with aiohttp.ClientSession() as session:
            return await self._post_search(session, term)

    async def _post_search(
        self, session: aiohttp.ClientSession, term: str
    ) -> List[SearchResult]:
        url = f"{self.base_url}/search"
        try:
            async with session.post(url, json={"term": term}) as response:
                data = await response.json(content_type=None)
                if response.status >= 400:
                    message = (
                        data.get("message") if isinstance(data, dict) else None
                    ) or f"HTTP error! Status: {response.status}"
                    raise SearchError(message, status_code=response.status)
        except SearchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Search request to {url} failed: {str(e)}")
            raise SearchError(f"Search request failed: {str(e)}") from e

        try:
            return _results_adapter.validate_python(data)
        except ValueError as e:
            raise SearchError(f"Unexpected response format: {str(e)}") from e


class Debouncer:
    """At most one pending call; a new trigger cancels the pending one first."""

    def __init__(self, delay: float, callback: Callable[..., Awaitable]):
        self.delay = delay
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def trigger(self, *args) -> asyncio.Task:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(*args))
        return self._task

    def cancel(self):
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self, *args):
        await asyncio.sleep(self.delay)
        return await self.callback(*args)


class SearchSession:
    def __init__(self, client: SearchClient, delay: float = DEFAULT_DEBOUNCE_DELAY):
        self.client = client
        self.term = ""
        self.content_type = ""
        self.original_results: List[SearchResult] = []
        self.results: List[SearchResult] = []
        self.loading = False
        self.error: Optional[str] = None
        self._debouncer = Debouncer(delay, self.run_search)

    def update_term(self, term: str) -> asyncio.Task:
        self.term = term
        return self._debouncer.trigger(term)

    async def run_search(self, term: Optional[str] = None) -> List[SearchResult]:
        term = self.term if term is None else term
        self.loading = True
        self.error = None
        try:
            found = await self.client.search(term)
        except SearchError as e:
            logger.error(f"Error fetching search results: {e.message}")
            self.error = GENERIC_FAILURE_MESSAGE
            return self.results
        finally:
            self.loading = False

        self.original_results = found
        self.results = filter_results(found, self.content_type)
        return self.results

    def set_content_type(self, content_type: Optional[str]) -> List[SearchResult]:
        self.content_type = content_type or ""
        self.results = filter_results(self.original_results, self.content_type)
        return self.results

    def close(self):
        self._debouncer.cancel()
