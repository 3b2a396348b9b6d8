"""Web scraping utilities for listing extraction."""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


class ScrapeError(Exception):
    """Base exception for scrape failures."""

    pass


class FetchError(ScrapeError):
    """Raised when a page cannot be fetched."""

    pass


class ParseError(ScrapeError):
    """Raised when fetched markup cannot be parsed."""

    pass


async def fetch_page_html(
    url: str,
    timeout: float = 10.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Fetch the raw HTML of a web page.

    Args:
        url: URL of the web page to fetch
        timeout: Request timeout in seconds
        transport: Optional httpx transport override

    Returns:
        Response body as text

    Raises:
        FetchError: On network failure or a non-2xx response
    """
    try:
        async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
            response = await client.get(url, follow_redirects=True)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP error fetching {url}: {e.response.status_code}")
        raise FetchError(f"{url} answered {e.response.status_code}") from e
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch page {url}: {e}")
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    logger.info(f"Fetched {len(response.text)} characters from {url}")
    return response.text


def _children_text(element: Tag) -> str:
    """Concatenated text of an element's child elements, trimmed."""
    # Bare text directly under the element is not included
    return "".join(child.get_text() for child in element.find_all(recursive=False)).strip()


def extract_texts(html: str, selector: str) -> list[str]:
    """
    Extract the child-element text of every element matching a CSS selector.

    For a listing heading such as
    ``<h3><span>1.</span><a>Inception</a><span>(2010)</span></h3>``
    this gives ``"1.Inception(2010)"``.

    Args:
        html: Page markup
        selector: CSS selector for the elements of interest

    Returns:
        One trimmed string per match (possibly empty), in document order

    Raises:
        ParseError: If the markup or selector can't be processed
    """
    try:
        soup = BeautifulSoup(html, "lxml")
        elements = soup.select(selector)
    except Exception as e:
        raise ParseError(f"Could not extract '{selector}': {e}") from e

    return [_children_text(element) for element in elements]
