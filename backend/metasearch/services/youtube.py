from typing import Any, Dict, List, Optional
import asyncio
import logging
import aiohttp
from .base import SearchProvider
from ..config import settings
from ..errors import ProviderError
from ..models import VideoResult

logger = logging.getLogger(__name__)


def parse_count(value: Any) -> int:
    """Statistics counters arrive as strings and may be hidden (absent)."""
    if value is None:
        return 0
    return max(0, int(value))


class YouTubeSearchProvider(SearchProvider):
    """Video search: one keyword search, then one statistics call per video."""

    name = "youtube"

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        max_results: Optional[int] = None,
        video_url_template: Optional[str] = None,
    ):
        super().__init__(session)
        self.api_key = api_key if api_key is not None else settings.YOUTUBE_API_KEY
        self.api_url = (api_url or settings.YOUTUBE_API_URL).rstrip("/")
        self.max_results = max_results or settings.VIDEO_RESULTS_LIMIT
        self.video_url_template = video_url_template or settings.VIDEO_URL_TEMPLATE

    async def search(self, term: str) -> List[VideoResult]:
        logger.info(f"Starting YouTube search for term: {term!r}")

        data = await self.get_json(
            f"{self.api_url}/search",
            {
                "part": "snippet",
                "maxResults": self.max_results,
                "q": term,
                "type": "video",
                "key": self.api_key,
            },
        )
        items = data.get("items") or []

        # Order of the statistics calls is irrelevant, gather keeps item order
        results = await asyncio.gather(*(self.build_result(item) for item in items))

        logger.info(f"YouTube search found {len(results)} results")
        return list(results)

    async def get_statistics(self, video_id: str) -> Dict[str, Any]:
        data = await self.get_json(
            f"{self.api_url}/videos",
            {"part": "statistics", "id": video_id, "key": self.api_key},
        )
        try:
            return data["items"][0]["statistics"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                self.name, f"no statistics returned for video {video_id}"
            ) from e

    async def build_result(self, item: Dict[str, Any]) -> VideoResult:
        try:
            video_id = item["id"]["videoId"]
            snippet = item["snippet"]
        except (KeyError, TypeError) as e:
            raise ProviderError(self.name, f"malformed search item: {item!r}") from e

        stats = await self.get_statistics(video_id)

        thumbnail = (snippet.get("thumbnails") or {}).get("medium") or {}
        try:
            return VideoResult(
                title=snippet.get("title", ""),
                link=self.video_url_template.format(video_id=video_id),
                views=parse_count(stats.get("viewCount")),
                likes=parse_count(stats.get("likeCount")),
                thumbnail=thumbnail.get("url"),
            )
        except ValueError as e:
            raise ProviderError(
                self.name, f"malformed statistics for video {video_id}: {e}"
            ) from e
