"""Movie lookup against the IMDb keyword search."""

import logging
from typing import Optional

import httpx

from src.core.config import Settings, settings
from src.services.movie_finder.models import MovieLookupResult
from src.utils.web_scraper import ScrapeError, extract_texts, fetch_page_html

logger = logging.getLogger(__name__)


class MovieFinderService:
    """Scrapes movie titles matching a set of keywords."""

    KEYWORD_SEPARATOR = "%2C"  # pre-encoded comma

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or settings
        self._transport = transport

    def build_search_url(self, keywords: list[str]) -> str:
        """
        Build the keyword search URL.

        Keywords are joined with a pre-encoded comma and are not escaped
        any further.

        Raises:
            ValueError: If no keywords are given
        """
        if not keywords:
            raise ValueError("At least one keyword is required")
        return self.config.imdb_search_url + self.KEYWORD_SEPARATOR.join(keywords)

    async def find_movies(self, keywords: list[str]) -> MovieLookupResult:
        """
        Look up movie titles for the given keywords.

        Fetch and parse failures don't raise; they come back as a result
        with ``error`` set and no titles.

        Args:
            keywords: Search terms, at least one

        Returns:
            MovieLookupResult with titles in page order

        Raises:
            ValueError: If no keywords are given
        """
        search_url = self.build_search_url(keywords)

        try:
            html = await fetch_page_html(
                search_url,
                timeout=self.config.http_timeout_seconds,
                transport=self._transport,
            )
            titles = extract_texts(html, self.config.movie_title_selector)
        except ScrapeError as e:
            logger.error(f"Movie lookup failed for {keywords}: {e}")
            return MovieLookupResult(
                keywords=keywords, search_url=search_url, error=str(e)
            )

        logger.info(f"Found {len(titles)} movies for keywords {keywords}")
        return MovieLookupResult(keywords=keywords, search_url=search_url, titles=titles)


# Singleton instance
movie_finder = MovieFinderService()
