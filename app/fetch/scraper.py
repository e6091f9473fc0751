import datetime as dt
import logging
import httpx
from typing import Optional
from app.core.config import settings
from app.exceptions import FetchError

from .base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)

_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "sk,cs;q=0.8,en;q=0.5",
}

class HttpxFetcher(BaseFetcher):
    """Fetches menu pages with httpx, following redirects."""

    def __init__(self, timeout: Optional[int] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.transport = transport

    async def fetch(self, url: str) -> FetchResult:
        if not url:
            raise FetchError("Menu URL is not configured")

        headers = {"User-Agent": settings.USER_AGENT, **_HEADERS}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(f"Timeout while fetching {url}") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP error {e.response.status_code} for {url}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch {url}: {e}") from e
        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid URL {url!r}: {e}") from e

        logger.debug("Fetched %s: %d characters", url, len(response.text))
        return FetchResult(
            url=url,
            status_code=response.status_code,
            final_url=str(response.url),
            html=response.text,
            fetched_at=dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
        )

async def fetch_html(url: str, fetcher: Optional[BaseFetcher] = None) -> str:
    """Fetch raw HTML of a menu page."""
    result = await (fetcher or HttpxFetcher()).fetch(url)
    return result.html
