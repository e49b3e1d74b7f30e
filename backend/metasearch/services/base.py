from typing import Any, Dict, List
import asyncio
import logging
import aiohttp
from ..errors import ProviderError

logger = logging.getLogger(__name__)


class SearchProvider:
    """Base class for search providers sharing one aiohttp session."""

    name = "provider"

    def __init__(self, session: aiohttp.ClientSession):
        self.session = session

    async def search(self, term: str) -> List[Any]:
        raise NotImplementedError

    async def get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET a JSON document, turning every failure into a ProviderError."""
        try:
            query = {k: v for k, v in params.items() if v is not None}
            async with self.session.get(url, params=query) as response:
                if response.status >= 400:
                    error_msg = f"API returned status code {response.status}"
                    logger.error(f"{self.name} {error_msg}")
                    raise ProviderError(self.name, error_msg)

                data = await response.json(content_type=None)

        except ProviderError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"{self.name} request error: {str(e)}")
            raise ProviderError(self.name, f"request failed: {str(e)}") from e
        except ValueError as e:
            logger.error(f"{self.name} returned invalid JSON: {str(e)}")
            raise ProviderError(self.name, "invalid JSON response") from e

        if not isinstance(data, dict):
            raise ProviderError(self.name, f"Unexpected response format: {data!r}")
        return data
