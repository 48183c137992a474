"""
Pydantic models for structured parse results.

The parser itself raises; these models are the non-raising view returned by
``NumberParser.evaluate`` and served by the HTTP API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .exceptions import NumberFormatError


class ParseFailure(BaseModel):
    """Why a phrase was rejected."""

    code: str  # Machine-readable, e.g. "MISPLACED_WORD"
    message: str  # Human-readable explanation
    offset: Optional[int] = None  # Character offset in the input
    details: dict = Field(default_factory=dict)

    @classmethod
    def from_error(cls, error: NumberFormatError) -> ParseFailure:
        return cls(
            code=error.code,
            message=error.message,
            offset=error.offset,
            details=error.details,
        )


class ParseResult(BaseModel):
    """Outcome of parsing one phrase."""

    text: str
    is_valid: bool
    value: Optional[int] = None
    error: Optional[ParseFailure] = None
