# =================================================================
# ufc_scraper/web_scraper.py - Simple page fetching
# =================================================================

import asyncio
import logging
from typing import Optional
import httpx
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential
from .config import Config

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """A page could not be fetched: transport failure, timeout or non-2xx status."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


def _is_retryable(error: BaseException) -> bool:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500
    return isinstance(error, httpx.TransportError)


class WebScraper:
    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "WebScraper":
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.listing_timeout,
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str, timeout: Optional[float] = None) -> str:
        """Return the page body, raising NetworkError on any failure."""
        if self._client is None:
            raise RuntimeError("WebScraper must be used as an async context manager")

        logger.info(f"🔍 Fetching {url}")
        try:
            if timeout:
                return await asyncio.wait_for(self._fetch_with_retry(url), timeout=timeout)
            return await self._fetch_with_retry(url)
        except asyncio.TimeoutError as e:
            logger.error(f"❌ Timed out after {timeout}s fetching {url}")
            raise NetworkError(url, f"timed out after {timeout}s") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"❌ HTTP {status} fetching {url}")
            raise NetworkError(url, f"HTTP {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.error(f"❌ Error fetching {url}: {str(e)}")
            raise NetworkError(url, str(e) or e.__class__.__name__) from e

    async def _fetch_with_retry(self, url: str) -> str:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.config.retry_attempts),
            wait=wait_exponential(multiplier=1, min=self.config.retry_wait_min, max=self.config.retry_wait_max),
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        ):
            with attempt:
                response = await self._client.get(url, headers={"User-Agent": self.config.user_agent})
                response.raise_for_status()
                return response.text
