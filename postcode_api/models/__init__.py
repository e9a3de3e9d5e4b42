"""
Data models and schemas for the postcode lookup application
"""

from .schemas import (
    PostcodeRecord,
    ExtractionSuccess,
    ExtractionEmpty,
    ExtractionFailure,
    ExtractionResult,
    ErrorResponse,
    HealthResponse
)

__all__ = [
    "PostcodeRecord",
    "ExtractionSuccess",
    "ExtractionEmpty",
    "ExtractionFailure",
    "ExtractionResult",
    "ErrorResponse",
    "HealthResponse"
]
