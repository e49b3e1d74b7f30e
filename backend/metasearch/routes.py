from fastapi import APIRouter
from typing import List
import logging
from .api import SearchRequest, ErrorResponse
from .errors import SearchError
from .models import SearchResult
from .services.search import perform_search

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/search",
    response_model=List[SearchResult],
    responses={500: {"model": ErrorResponse}},
)
async def search(request: SearchRequest):
    logger.info(f"\n{'='*50}")
    logger.info(f"New search request: {request.term!r}")

    try:
        return await perform_search(request.term)

    except SearchError:
        raise
    except Exception as e:
        # Every failure reaches the client as the same generic error
        logger.error(f"Search error: {str(e)}")
        raise SearchError(str(e) or type(e).__name__) from e
