from typing import List, Optional
import asyncio
import logging
import aiohttp
from ..config import Settings, settings as default_settings
from ..models import SearchResult
from .google import GoogleSearchProvider
from .ranking import rank_results
from .youtube import YouTubeSearchProvider

logger = logging.getLogger(__name__)


async def gather_results(
    term: str, session: aiohttp.ClientSession, settings: Settings
) -> List[SearchResult]:
    """Run both providers concurrently; videos first, then articles."""
    youtube = YouTubeSearchProvider(
        session,
        api_key=settings.YOUTUBE_API_KEY,
        api_url=settings.YOUTUBE_API_URL,
        max_results=settings.VIDEO_RESULTS_LIMIT,
        video_url_template=settings.VIDEO_URL_TEMPLATE,
    )
    google = GoogleSearchProvider(
        session,
        api_key=settings.GOOGLE_API_KEY,
        engine_id=settings.CUSTOM_SEARCH_ENGINE_ID,
        api_url=settings.CUSTOM_SEARCH_API_URL,
    )

    # A failure in either provider fails the whole search
    video_results, article_results = await asyncio.gather(
        youtube.search(term),
        google.search(term),
    )
    logger.info(
        f"Collected {len(video_results)} videos and {len(article_results)} articles"
    )
    return [*video_results, *article_results]


async def perform_search(
    term: str, settings: Optional[Settings] = None
) -> List[SearchResult]:
    """Main search function that orchestrates the entire search process."""
    settings = settings or default_settings
    logger.info(f"New search for term: {term!r}")

    try:
        async with aiohttp.ClientSession() as session:
            combined = await gather_results(term, session, settings)
    except Exception as e:
        logger.error(f"Search error: {str(e)}")
        raise

    ranked = rank_results(combined)
    logger.info(f"Returning {len(ranked)} ranked results")
    return ranked
