"""Base scraper class and shared HTTP / parsing helpers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Optional
from urllib.parse import urljoin

import httpx
from bs4 import Tag

from brestagenda.config import Config
from brestagenda.models import Event

logger = logging.getLogger(__name__)


class ScrapeError(Exception):
    """Base class for every crawl failure."""


class FetchError(ScrapeError):
    """Transport failure or unexpected HTTP status."""


class ServerError(FetchError):
    """The listing page answered HTTP 500."""

    def __init__(self, url: str) -> None:
        super().__init__(f"GET {url} got 500")
        self.url = url


class ExtractError(ScrapeError):
    """A listing page could not be converted into events."""


class NoEventsError(ScrapeError):
    """The crawl finished without a single event."""


class BaseScraper(ABC):
    """Abstract base class for a paginated listing scraper.

    Provides an HTTP ``fetch()`` helper that:
    - Returns the response for HTTP 200.
    - Raises ``ServerError`` for HTTP 500 so the caller can stop cleanly.
    - Raises ``FetchError`` for any other status or transport failure.
    - Optionally writes each raw body to ``config.dump_dir``.

    The ``scrape()`` method handles resource cleanup (closing the HTTP client)
    via a template-method pattern; subclasses implement ``_scrape_impl()``.
    """

    name: ClassVar[str] = ""

    def __init__(self, config: Optional[Config] = None, client: Optional[httpx.Client] = None) -> None:
        self.config = config or Config()
        self._client = client or httpx.Client(
            timeout=self.config.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
        )
        self._request_count = 0

    # ------------------------------------------------------------------
    # Shared utilities
    # ------------------------------------------------------------------

    @staticmethod
    def absolute_url(base: str, href: str) -> str:
        """Join *href* against *base* to produce a full URL."""
        return urljoin(base, href or "")

    @staticmethod
    def text_of(node: Optional[Tag]) -> str:
        """Whitespace-trimmed text of *node*, or '' when it is missing."""
        if node is None:
            return ""
        return node.get_text().strip()

    # ------------------------------------------------------------------
    # HTTP helper
    # ------------------------------------------------------------------

    def fetch(self, url: str) -> httpx.Response:
        """GET *url* and return the response.

        Raises:
            ServerError: on HTTP 500.
            FetchError: on any other non-200 status or transport error.
        """
        page_num = self._request_count
        self._request_count += 1

        logger.info("GET %s", url)
        try:
            resp = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"GET {url} failed: {exc}") from exc

        if resp.status_code == 500:
            raise ServerError(url)
        if resp.status_code != 200:
            raise FetchError(f"GET {url} got {resp.status_code}")

        if self.config.dump_dir is not None:
            self._dump(resp, page_num)
        return resp

    def _dump(self, resp: httpx.Response, page_num: int) -> None:
        """Write the raw body of *resp* as ``<page_num>.html``."""
        path = Path(self.config.dump_dir) / f"{page_num}.html"
        logger.info("writing %s", path)
        path.write_bytes(resp.content)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def request_count(self) -> int:
        """Number of GET requests issued so far."""
        return self._request_count

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def scrape(self) -> list[Event]:
        """Fetch and parse events from this source.

        Handles resource cleanup automatically; subclasses should
        implement ``_scrape_impl()`` instead of overriding this method.
        """
        try:
            return self._scrape_impl()
        finally:
            self.close()

    @abstractmethod
    def _scrape_impl(self) -> list[Event]:
        """Subclass hook: fetch and parse events.

        Returns:
            A list of Event objects.
        """
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
