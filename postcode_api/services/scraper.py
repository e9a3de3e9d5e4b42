import requests
from bs4 import BeautifulSoup
from typing import Callable, Optional
import logging

from postcode_api.config import settings
from postcode_api.services.exceptions import (
    RequestBuildError, FetchError, UpstreamStatusError, ParseError
)

logger = logging.getLogger(__name__)


class WebScraper:
    def __init__(
            self,
            timeout: Optional[float] = None,
            user_agent: Optional[str] = None,
            session_factory: Callable[[], requests.Session] = requests.Session
    ):
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session_factory()
        self.headers = {
            'User-Agent': user_agent or settings.USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def get_page(self, url: str) -> str:
        """Fetch a page and return its HTML, raising on anything but HTTP 200"""
        try:
            prepared = self.session.prepare_request(requests.Request('GET', url, headers=self.headers))
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RequestBuildError(f"Failed to create request: {e}") from e

        try:
            response = self.session.send(prepared, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Failed to fetch the page: {e}") from e

        try:
            if response.status_code != 200:
                raise UpstreamStatusError(response.status_code)
            return response.text
        finally:
            response.close()

    def get_soup(self, html: str) -> BeautifulSoup:
        """Parse HTML with lxml"""
        try:
            return BeautifulSoup(html, 'lxml')
        except Exception as e:
            raise ParseError(f"Failed to parse HTML: {e}") from e

    def close(self):
        """Close the session"""
        if self.session:
            self.session.close()
