"""
Number Words — FastAPI Server
=============================

HTTP access to the number-phrase parser.

Endpoints:
    POST /parse             Parse an English number phrase
    GET  /spell/{value}     Spell an integer as the canonical phrase
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from number_words import __version__
from number_words.exceptions import OutOfRangeError
from number_words.models import ParseResult
from number_words.parser import NumberParser
from number_words.spelling import number_to_words

load_dotenv()


# ─── Application Lifespan (pre-warm parser) ─────────────────────────

_parser: NumberParser | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the parser (settings, lexicon, scale table) on startup."""
    global _parser  # noqa: PLW0603
    _parser = NumberParser()
    yield
    _parser = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Words API",
    description=(
        "Strict parser for American-English integer phrases, "
        "with precise diagnostics for malformed input."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    text: str = Field(
        ...,
        max_length=10_000,
        description="The number phrase to parse.",
        json_schema_extra={
            "example": "negative nine hundred eighty seven million "
            "six hundred fifty four thousand three hundred twenty one"
        },
    )


class SpellResponse(BaseModel):
    value: int
    words: str


class HealthResponse(BaseModel):
    status: str
    version: str
    max_scale: str
    max_magnitude: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_parser() -> NumberParser:
    if _parser is None:
        raise HTTPException(status_code=503, detail="Parser not initialised")
    return _parser


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse an English number phrase",
    tags=["Parsing"],
    responses={503: {"description": "Parser not yet initialised"}},
)
def parse_phrase(request: ParseRequest) -> ParseResult:
    """Parse the phrase into a signed integer.

    Malformed phrases are not HTTP errors: the result has **is_valid** set
    to `false` and an **error** with a machine-readable code, message and
    character offset.
    """
    return _get_parser().evaluate(request.text)


@app.get(
    "/spell/{value}",
    summary="Spell an integer in words",
    tags=["Parsing"],
    responses={
        422: {"description": "Value outside the supported range"},
        503: {"description": "Parser not yet initialised"},
    },
)
def spell_value(value: int) -> SpellResponse:
    """Return the canonical phrase for ``value``, which ``/parse`` accepts."""
    parser = _get_parser()
    try:
        words = number_to_words(value, parser.scale_table)
    except OutOfRangeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return SpellResponse(value=value, words=words)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Parser not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    parser = _get_parser()
    return HealthResponse(
        status="healthy",
        version=__version__,
        max_scale=parser.settings.max_scale,
        max_magnitude=parser.max_magnitude,
    )
