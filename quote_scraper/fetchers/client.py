"""HTML document client for quote pages."""

import logging
import threading
from typing import Any

import httpx
from bs4 import BeautifulSoup
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from quote_scraper.errors import FetchFailed, ReadFailed
from quote_scraper.models.config import ScraperConfig


logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


class DocumentClient:
    """Fetches a page and parses it into a queryable document.

    Handles browser-like headers, timeouts and retries on transient
    network errors. Safe to share between threads.
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self.config = config or ScraperConfig()
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()
        self.fetch_count = 0

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self.config.http.timeout,
                    headers=dict(self.config.http.headers),
                    follow_redirects=self.config.http.follow_redirects,
                    transport=self._transport,
                )
            return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self) -> "DocumentClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _send(self, url: str) -> httpx.Response:
        """Send the request with retry logic, leaving the body unread."""
        client = self._get_client()
        retry_config = self.config.retry

        @retry(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            stop=stop_after_attempt(retry_config.max_attempts),
            wait=wait_exponential(
                multiplier=retry_config.backoff_multiplier,
                min=retry_config.initial_delay,
            ),
            reraise=True,
        )
        def _do_send() -> httpx.Response:
            request = client.build_request("GET", url)
            response = client.send(request, stream=True)
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError:
                response.close()
                raise
            return response

        return _do_send()

    def fetch(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` and parse the body as HTML.

        Raises:
            FetchFailed: If the request could not be sent or got an error status
            ReadFailed: If the response body could not be read
        """
        with self._lock:
            self.fetch_count += 1
        logger.debug(f"Fetching {url}")

        try:
            response = self._send(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchFailed(f"Failed to fetch {url}: {e}", url=url) from e

        try:
            response.read()
            text = response.text
        except httpx.HTTPError as e:
            raise ReadFailed(f"Failed to read response from {url}: {e}", url=url) from e
        finally:
            response.close()

        return BeautifulSoup(text, HTML_PARSER)
