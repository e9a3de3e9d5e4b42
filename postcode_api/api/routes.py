import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from postcode_api.config import settings
from postcode_api.models.schemas import ErrorResponse, ExtractionSuccess
from postcode_api.services.pacing import RequestPacer
from postcode_api.services.postcode_extractor import PostcodeExtractor

logger = logging.getLogger(__name__)
router = APIRouter()

MISSING_KEYWORD_MESSAGE = "Missing 'keyword' parameter in the query string. Example: /search?keyword=sydney"


# Dependency injection for services
def get_postcode_extractor() -> PostcodeExtractor:
    return PostcodeExtractor()


def get_request_pacer() -> RequestPacer:
    return RequestPacer()


@router.get("/search")
def search_postcodes(
        keyword: Optional[str] = None,
        extractor: PostcodeExtractor = Depends(get_postcode_extractor),
        pacer: RequestPacer = Depends(get_request_pacer)
):
    """
    Look up postcodes for a suburb or town keyword

    **Parameters:**
    - keyword: Suburb or town name, e.g. "sydney"

    **Returns:**
    - List of postcode, suburb and state records

    **Error Codes:**
    - 400: keyword missing or empty
    - 500: upstream failure, or no postcodes found for the keyword
    """
    if not keyword:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=MISSING_KEYWORD_MESSAGE).model_dump()
        )

    # Be polite to the upstream site
    pacer.wait()

    result = extractor.search(keyword)
    payload = result.to_payload(include_diagnostics=settings.EXPOSE_DIAGNOSTICS)

    if not isinstance(result, ExtractionSuccess):
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)

    return JSONResponse(status_code=status.HTTP_200_OK, content=payload)
