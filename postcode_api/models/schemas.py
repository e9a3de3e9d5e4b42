from pydantic import BaseModel, Field
from typing import List, Dict, Any, Union, Literal
from datetime import datetime


class PostcodeRecord(BaseModel):
    postcode: str
    suburb: str
    state: str = ""


class ExtractionSuccess(BaseModel):
    kind: Literal["success"] = "success"
    records: List[PostcodeRecord] = []

    def to_payload(self, include_diagnostics: bool = False) -> List[Dict[str, str]]:
        return [record.model_dump() for record in self.records]


class ExtractionEmpty(BaseModel):
    kind: Literal["empty"] = "empty"
    keyword: str
    # False when the results table selector matched nothing at all
    table_found: bool = True

    @property
    def message(self) -> str:
        return f"No postcodes found for keyword '{self.keyword}'. Please verify the CSS selectors."

    def to_payload(self, include_diagnostics: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message}
        if include_diagnostics:
            payload["table_found"] = self.table_found
        return payload


class ExtractionFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    reason: str

    def to_payload(self, include_diagnostics: bool = False) -> Dict[str, str]:
        return {"error": self.reason}


ExtractionResult = Union[ExtractionSuccess, ExtractionEmpty, ExtractionFailure]


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: datetime = Field(default_factory=datetime.now)
    version: str
    service: str
