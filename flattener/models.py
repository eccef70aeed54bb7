from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class HeaderIndex(NamedTuple):
    """Zero-based positions of the two required columns in the header row."""

    username: int
    display_name: int

    @property
    def required_width(self) -> int:
        return max(self.username, self.display_name) + 1


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    display_name: str = Field(alias="displayName")


class FileInfo(BaseModel):
    name: str
    size: int
    size_label: str


class ConvertSummary(BaseModel):
    records: int
    skipped_rows: int = 0
    preview_rows: int
    more_records: int = 0
    characters: int = 0


class ConvertResponse(BaseModel):
    file: FileInfo
    summary: ConvertSummary
    records: List[Record] = Field(default_factory=list)
    preview: List[Record] = Field(default_factory=list)
    output: str = ""


class TextConvertRequest(BaseModel):
    text: str
    filename: Optional[str] = Field(default="pasted.csv", examples=["pasted.csv"])


class HealthResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    # A message for conversion errors, FastAPI's error list for invalid requests.
    detail: Union[str, List[Dict[str, Any]]]
