"""
Postcode Lookup API

A small HTTP service that looks up Australian postcodes by suburb keyword:
- Fetches the Australia Post postcode search page
- Extracts the postcode results table
- Returns postcode, suburb and state as JSON
"""

__version__ = "1.0.0"
