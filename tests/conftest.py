"""Shared fixtures: synthetic upstream pages and a fake requests session."""

from __future__ import annotations

import pytest
import requests
from fastapi.testclient import TestClient

from postcode_api.api.routes import get_postcode_extractor, get_request_pacer
from postcode_api.main import app
from postcode_api.services.pacing import RequestPacer
from postcode_api.services.postcode_extractor import PostcodeExtractor
from postcode_api.services.scraper import WebScraper

BASE_URL = "https://postcodes.test/postcode/"
SELECTOR = "table.fn_tablePostcodeList"

RESULTS_PAGE = """
<html><body>
<table class="resultsList fn_tableResultsList fn_tablePostcodeList">
  <tr><th>Postcode</th><th>Suburb</th><th>Category</th></tr>
  <tr><td> 2055 </td><td>NORTH SYDNEY, NSW</td><td>Delivery Area</td></tr>
  <tr><td>2060</td><td>  NORTH SYDNEY ,  NSW </td><td>Post Office Boxes</td></tr>
  <tr><td>0200</td><td>AUSTRALIAN NATIONAL UNIVERSITY</td><td>Delivery Area</td></tr>
  <tr><td>9999</td></tr>
  <tr><td></td><td>NOWHERE, VIC</td></tr>
  <tr><td>3000</td><td> , VIC</td></tr>
</table>
</body></html>
"""

EMPTY_TABLE_PAGE = """
<html><body>
<table class="fn_tablePostcodeList">
  <tr><th>Postcode</th><th>Suburb</th><th>Category</th></tr>
</table>
</body></html>
"""

NO_TABLE_PAGE = "<html><body><p>Redesigned page</p></body></html>"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text
        self.closed = False

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Stands in for requests.Session: prepares real requests, answers with canned responses."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response or FakeResponse()
        self.error = error
        self.sent = []
        self.timeouts = []
        self.closed = False

    def prepare_request(self, request: requests.Request) -> requests.PreparedRequest:
        return request.prepare()

    def send(self, prepared, timeout=None):
        self.sent.append(prepared)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session():
    return FakeSession(FakeResponse(200, RESULTS_PAGE))


@pytest.fixture
def make_extractor():
    def _make(session: FakeSession, base_url: str = BASE_URL, selector: str = SELECTOR) -> PostcodeExtractor:
        def scraper_factory(**kwargs):
            return WebScraper(session_factory=lambda: session, **kwargs)

        return PostcodeExtractor(
            base_url=base_url,
            table_selector=selector,
            timeout=10,
            scraper_factory=scraper_factory,
        )

    return _make


@pytest.fixture
def client():
    app.dependency_overrides[get_request_pacer] = lambda: RequestPacer(0)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_session(make_extractor):
    """Route the search endpoint through an extractor backed by the given fake session."""

    def _use(session: FakeSession) -> FakeSession:
        app.dependency_overrides[get_postcode_extractor] = lambda: make_extractor(session)
        return session

    return _use
