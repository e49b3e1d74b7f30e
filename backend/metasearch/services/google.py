from typing import Any, Dict, List, Optional
import logging
import aiohttp
from .base import SearchProvider
from ..config import settings
from ..errors import ProviderError
from ..models import ArticleResult

logger = logging.getLogger(__name__)


def extract_thumbnail(item: Dict[str, Any]) -> Optional[str]:
    """Preview image from pagemap.cse_image, when the page has one."""
    images = (item.get("pagemap") or {}).get("cse_image") or []
    if images and isinstance(images[0], dict):
        return images[0].get("src")
    return None


class GoogleSearchProvider(SearchProvider):
    """Article and blog search through the Google Custom Search API."""

    name = "google"

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: Optional[str] = None,
        engine_id: Optional[str] = None,
        api_url: Optional[str] = None,
    ):
        super().__init__(session)
        self.api_key = api_key if api_key is not None else settings.GOOGLE_API_KEY
        self.engine_id = (
            engine_id if engine_id is not None else settings.CUSTOM_SEARCH_ENGINE_ID
        )
        self.api_url = api_url or settings.CUSTOM_SEARCH_API_URL

    async def search(self, term: str) -> List[ArticleResult]:
        logger.info(f"Starting Google search for term: {term!r}")

        data = await self.get_json(
            self.api_url,
            {"q": term, "cx": self.engine_id, "key": self.api_key},
        )

        # No "items" key at all means no hits
        results = [self.build_result(item) for item in data.get("items") or []]

        logger.info(f"Google search found {len(results)} results")
        return results

    def build_result(self, item: Dict[str, Any]) -> ArticleResult:
        try:
            return ArticleResult(
                title=item["title"],
                link=item["link"],
                snippet=item.get("snippet", ""),
                thumbnail=extract_thumbnail(item),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(self.name, f"malformed search item: {item!r}") from e
