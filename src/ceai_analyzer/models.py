from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ErrorKind


def format_size_kb(size: int) -> str:
    return f"{size / 1024:.2f} KB"


@dataclass(frozen=True)
class UploadedFile:
    """
    A CSV file held in memory for the current browser session.

    name: file name as reported by the browser (or the path name on the CLI)
    size: size in bytes
    content: decoded text; never empty
    """
    name: str
    size: int
    content: str

    @property
    def size_kb(self) -> str:
        return format_size_kb(self.size)


class AnalyzeInput(BaseModel):
    """Request for the model flow. `csvData` on the wire."""
    model_config = ConfigDict(populate_by_name=True)

    csv_data: str = Field(alias="csvData", description="The CSV data of the CEAI survey responses.")


class AnalyzeOutput(BaseModel):
    """Model reply. The summary is plain text with ALL UPPERCASE headings."""
    summary: Optional[str] = None


class RetryPolicy(BaseModel):
    """
    Bounded retry for overloaded-model errors.

    max_attempts counts the first call; 1 disables retrying.
    """
    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=3, ge=1)
    delay_seconds: float = Field(default=2.0, ge=0.0)

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        return cls(max_attempts=1, delay_seconds=0.0)


class AnalysisResult(BaseModel):
    """
    Outcome of one submission: exactly one of summary / error is set.

    kind: failure category, None on success
    attempts: number of model calls made for this submission
    """
    summary: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    attempts: int = 0

    @model_validator(mode="after")
    def _exactly_one(self) -> "AnalysisResult":
        if (self.summary is None) == (self.error is None):
            raise ValueError("AnalysisResult needs exactly one of summary or error")
        if self.error is not None and self.kind is None:
            raise ValueError("AnalysisResult error needs a kind")
        return self

    @property
    def ok(self) -> bool:
        return self.summary is not None

    @classmethod
    def success(cls, summary: str, *, attempts: int) -> "AnalysisResult":
        return cls(summary=summary, attempts=attempts)

    @classmethod
    def failure(cls, error: str, kind: ErrorKind, *, attempts: int = 0) -> "AnalysisResult":
        return cls(error=error, kind=kind, attempts=attempts)
