from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class StripRequest(BaseModel):
    text: str
    substring: str = Field(examples=["@world"])


class StripPolicy(BaseModel):
    match: str = "literal"
    order: str = "leftmost_until_absent"
    trim: str = "trailing_ascii_whitespace"
    delimiter: str = "lf"


class StripReport(BaseModel):
    substring: str
    lines: int
    lines_changed: int = 0
    removals: int = 0
    lines_trimmed: int = 0
    policy: StripPolicy = Field(default_factory=StripPolicy)


class StripResponse(BaseModel):
    text: str
    report: StripReport


class StrippedText(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class EncodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str
    decode_fallback: bool = False
    output: str = "utf-8"


class FileReport(BaseModel):
    summary: StripReport
    encoding: EncodingReport


class StripFileResponse(BaseModel):
    stripped_text: StrippedText
    report: FileReport


class HealthResponse(BaseModel):
    ok: bool = True
