"""
Business logic services for postcode lookup
"""

from .scraper import WebScraper
from .postcode_extractor import PostcodeExtractor
from .pacing import RequestPacer

__all__ = ["WebScraper", "PostcodeExtractor", "RequestPacer"]
