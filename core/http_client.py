import logging
import os
import httpx
from typing import Optional
from fake_useragent import UserAgent
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type, retry_if_not_exception_type

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class FetchError(Exception):
    """Raised when the page answers with anything other than 200 OK."""

    def __init__(self, status_code: int):
        super().__init__(f"failed to fetch URL: status code {status_code}")
        self.status_code = status_code


class HTTPClient:
    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.ua = UserAgent()
        if timeout is None:
            timeout = float(os.getenv("OG_HTTP_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout
        self.client = httpx.AsyncClient(http2=False, follow_redirects=True, transport=transport)

    def _get_headers(self):
        return {
            "User-Agent": self.ua.random,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "DNT": "1",
            "Connection": "keep-alive",
            "Upgrade-Insecure-Requests": "1",
        }

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=(
            retry_if_exception_type((httpx.RequestError, httpx.TimeoutException))
            & retry_if_not_exception_type(httpx.UnsupportedProtocol)
        ),
        reraise=True,
    )
    async def fetch(self, url: str) -> str:
        """
        Fetches a page and returns its HTML.
        Transport errors are retried. A missing or unknown scheme, a malformed URL
        and a non-200 status fail straight away.
        """
        try:
            response = await self.client.get(url, headers=self._get_headers(), timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise

        if response.status_code != httpx.codes.OK:
            logger.error(f"Failed to fetch {url}: HTTP {response.status_code}")
            raise FetchError(response.status_code)

        logger.info(f"Successfully fetched {url}")
        return response.text

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
