from typing import Callable, Optional
import logging

from postcode_api.config import settings
from postcode_api.models.schemas import (
    ExtractionResult, ExtractionSuccess, ExtractionEmpty, ExtractionFailure
)
from postcode_api.services.exceptions import InputError, ParseError, PostcodeLookupError
from postcode_api.services.scraper import WebScraper
from postcode_api.utils.helpers import build_search_url
from postcode_api.utils.parsing import parse_postcode_table

logger = logging.getLogger(__name__)


class PostcodeExtractor:
    """
    Looks up postcodes for a suburb keyword on the Australia Post search page.

    Holds configuration only; every search opens and closes its own scraper,
    so one instance can be shared between threads.
    """

    def __init__(
            self,
            base_url: Optional[str] = None,
            table_selector: Optional[str] = None,
            timeout: Optional[float] = None,
            user_agent: Optional[str] = None,
            scraper_factory: Optional[Callable[..., WebScraper]] = None
    ):
        self.base_url = base_url or settings.POSTCODE_BASE_URL
        self.table_selector = table_selector or settings.POSTCODE_TABLE_SELECTOR
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.user_agent = user_agent or settings.USER_AGENT
        self.scraper_factory = scraper_factory or WebScraper

    def search(self, keyword: str) -> ExtractionResult:
        """Fetch and parse the postcode table for a keyword"""
        try:
            return self._search(keyword)
        except PostcodeLookupError as e:
            logger.error(f"Postcode lookup failed for keyword '{keyword}': {e}")
            return ExtractionFailure(reason=str(e))

    def _search(self, keyword: str) -> ExtractionResult:
        # Whitespace-only keywords would fetch the bare search page; reject them up front
        if not keyword or not keyword.strip():
            raise InputError("Keyword cannot be empty.")

        url = build_search_url(self.base_url, keyword)
        logger.info(f"Scraping target: {url}")

        with self.scraper_factory(timeout=self.timeout, user_agent=self.user_agent) as scraper:
            html = scraper.get_page(url)
            soup = scraper.get_soup(html)

        try:
            records, table_found = parse_postcode_table(soup, self.table_selector)
        except Exception as e:
            raise ParseError(f"Failed to parse HTML: {e}") from e

        if not table_found:
            logger.warning(
                f"Selector '{self.table_selector}' did not find any elements for keyword '{keyword}'."
            )

        if not records:
            return ExtractionEmpty(keyword=keyword, table_found=table_found)

        logger.info(f"Extracted {len(records)} postcodes for keyword '{keyword}'")
        return ExtractionSuccess(records=records)
