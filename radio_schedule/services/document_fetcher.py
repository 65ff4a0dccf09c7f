"""
Document fetching

Downloads upstream schedule pages with httpx. Send and body-read failures are
reported as distinct schedule errors; nothing is retried.
"""
import logging

import httpx

from radio_schedule.errors import RequestSendFailed, ResponseBodyError


logger = logging.getLogger(__name__)


class DocumentFetcher:
    """
    Fetches raw page bytes over HTTP.

    A new client is opened per fetch, so the fetcher holds no state between
    requests. ``transport`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        """
        Download a page and return its body

        Args:
            url: URL to download from

        Returns:
            Raw response body

        Raises:
            RequestSendFailed: On connection errors, timeouts or non-2xx status
            ResponseBodyError: If the body cannot be read to the end
        """
        logger.info(f"Fetching document from {url}...")

        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            transport=self._transport,
            follow_redirects=True
        ) as client:
            request = client.build_request("GET", url)
            try:
                response = await client.send(request, stream=True)
            except httpx.HTTPError as e:
                logger.error(f"Request to {url} failed: {type(e).__name__}: {e}")
                raise RequestSendFailed(f"failed to send http request to {url}: {e}") from e

            try:
                if response.is_error:
                    logger.error(f"HTTP {response.status_code} from {url}")
                    raise RequestSendFailed(f"upstream {url} returned HTTP {response.status_code}")

                try:
                    body = await response.aread()
                except httpx.HTTPError as e:
                    logger.error(f"Reading response body from {url} failed: {type(e).__name__}: {e}")
                    raise ResponseBodyError(f"failed while reading response from {url}: {e}") from e
            finally:
                await response.aclose()

        logger.info(f"Fetched {len(body) / 1024:.1f} KB from {url}")
        return body
