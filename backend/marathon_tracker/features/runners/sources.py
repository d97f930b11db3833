"""
Result sources.

A source turns a query into an Extraction. Two implementations:
- HtmlResultSource: rendered per-bib result page (bib numbers only)
- UpstreamJsonSource: player JSON API (bib numbers and names)

The source is chosen once at startup by build_source().
"""

import functools
import logging
import re
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional
from urllib.parse import quote

import httpx

from .browser import load_rendered_page
from .errors import (
    ConfigurationError,
    ParseError,
    UpstreamError,
    UpstreamTimeoutError,
)
from .html_extractor import parse_result_page
from .json_extractor import parse_player_payload
from .models import Extraction

logger = logging.getLogger(__name__)

BIB_PATTERN = re.compile(r"[0-9]+")

PageLoader = Callable[[str], Awaitable[str]]


def is_bib_number(query: str) -> bool:
    return BIB_PATTERN.fullmatch(query) is not None


class ResultSource(ABC):
    """Abstract base class for result sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name for logs."""
        pass

    @abstractmethod
    def supports(self, query: str) -> bool:
        """Whether this source can look up the query."""
        pass

    @abstractmethod
    async def fetch(self, query: str) -> Extraction:
        """
        Look up a runner.

        Args:
            query: Validated, stripped bib number or name

        Returns:
            Extraction with checkpoints in race order

        Raises:
            TrackerError subclasses
        """
        pass


class HtmlResultSource(ResultSource):
    """Scrapes the per-bib result page through a headless browser."""

    def __init__(self, url_template: str, page_loader: Optional[PageLoader] = None):
        self.url_template = url_template
        self.page_loader = page_loader or load_rendered_page

    @property
    def name(self) -> str:
        return "html"

    def supports(self, query: str) -> bool:
        return is_bib_number(query)

    def page_url(self, bib_number: str) -> str:
        return self.url_template.format(bib=bib_number)

    async def fetch(self, query: str) -> Extraction:
        if not self.supports(query):
            raise ConfigurationError()

        url = self.page_url(query)
        logger.debug(f"Loading result page {url}")
        html = await self.page_loader(url)
        return parse_result_page(html, query)


class UpstreamJsonSource(ResultSource):
    """Queries the player JSON API."""

    def __init__(
        self,
        base_url: str,
        event_id: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.event_id = event_id
        self.timeout = timeout
        self.transport = transport

    @property
    def name(self) -> str:
        return "json"

    def supports(self, query: str) -> bool:
        return bool(query)

    @property
    def player_url(self) -> str:
        return f"{self.base_url}/api/event/{quote(self.event_id, safe='')}/player"

    async def fetch(self, query: str) -> Extraction:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.player_url,
                    params={"q": query},
                    headers={"Accept": "application/json"},
                )
        except httpx.TimeoutException as e:
            logger.warning(f"Upstream timeout for {query!r}: {e}")
            raise UpstreamTimeoutError() from e
        except httpx.HTTPError as e:
            logger.error(f"Upstream request failed for {query!r}: {e}")
            raise UpstreamError() from e

        if not response.is_success:
            logger.warning(f"Upstream {response.status_code} for {query!r}")
            raise UpstreamError(status=response.status_code, body=response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Upstream returned invalid JSON for {query!r}: {e}")
            raise ParseError() from e

        return parse_player_payload(data, query)


def build_source(settings) -> ResultSource:
    """JSON API when configured, result pages otherwise."""
    if settings.marathon_api_base:
        logger.info(
            f"Result source: JSON API {settings.marathon_api_base} "
            f"(event {settings.marathon_event_id})"
        )
        return UpstreamJsonSource(
            base_url=settings.marathon_api_base,
            event_id=settings.marathon_event_id,
            timeout=settings.upstream_timeout_s,
        )

    logger.info(f"Result source: result pages {settings.result_page_url}")
    loader = functools.partial(
        load_rendered_page,
        executable_path=settings.chromium_path,
        page_load_timeout_s=settings.page_load_timeout_s,
        table_wait_timeout_s=settings.table_wait_timeout_s,
    )
    return HtmlResultSource(settings.result_page_url, page_loader=loader)
