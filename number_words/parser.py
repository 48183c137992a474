"""
Number parser: turns a whole phrase into a signed integer.

Flow:
  ┌──────────────┐
  │  Raw phrase  │
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Tokenize    │   ← lowercase, whitespace runs, offsets kept
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │    Sign      │   ← leading "minus" / "negative"
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Zero or      │   ← "zero" / "naught" only as the whole number
  │ scale scan   │   ← million → thousand → ones, each via the triple parser
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ Range check  │   ← configured integer width
  └──────────────┘

Rules:
  - A scale word with nothing before it ("thousand five") is an error.
  - A missing bracket ("one million twenty") simply contributes zero.
  - Bracket failures are re-raised with the bracket name added; the inner
    message and offset are kept.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from .config import ParserSettings, load_settings
from .exceptions import (
    EmptyInputError,
    EmptyScaleBracketError,
    MisplacedWordError,
    NumberFormatError,
    OutOfRangeError,
    TrailingGarbageError,
)
from .lexicon import Scale, WordClass, build_lexicon, build_scale_table
from .models import ParseFailure, ParseResult
from .triple import Token, join_words, parse_triple_tokens, tokenize

logger = logging.getLogger(__name__)


class NumberParser:
    """Parses American-English number phrases.

    Usage:
        parser = NumberParser()
        parser.parse("negative forty two")        # -42
        parser.evaluate("forty forty").is_valid   # False

    Instances hold only read-only tables and are safe to share between
    threads.
    """

    def __init__(self, settings: ParserSettings | None = None):
        self.settings = settings or load_settings()
        self.scale_table: tuple[Scale, ...] = build_scale_table(self.settings.max_scale)
        self.lexicon = build_lexicon(self.scale_table)
        self._bracket_words = frozenset(s.word for s in self.scale_table if s.word)

    @property
    def max_magnitude(self) -> int:
        """Largest positive value ``parse`` accepts under the scale table and integer width."""
        magnitude = self.scale_table[0].multiplier * 1000 - 1
        bounds = self.settings.int_range
        if bounds is not None:
            magnitude = min(magnitude, bounds[1])
        return magnitude

    def parse(self, text: str | None) -> int:
        """Parse a full phrase.

        Raises:
            NumberFormatError: Subclass naming the kind of problem.
        """
        if text is None or not text.strip():
            raise EmptyInputError("Empty input: expected an English number phrase")

        tokens = tokenize(text)
        logger.debug("Tokens: %s", [t.word for t in tokens])

        sign, tokens = self._strip_sign(tokens)

        if len(tokens) == 1:
            entry = self.lexicon.lookup(tokens[0].word)
            if entry is not None and entry.word_class is WordClass.ZERO:
                logger.debug("Zero phrase %r", tokens[0].word)
                return 0

        value = sign * self._sum_brackets(tokens)
        self._check_range(value)
        return value

    def evaluate(self, text: str | None) -> ParseResult:
        """Like ``parse`` but returns a ParseResult instead of raising."""
        try:
            value = self.parse(text)
        except NumberFormatError as e:
            logger.debug("Rejected %r: %s", text, e)
            return ParseResult(
                text=text or "", is_valid=False, error=ParseFailure.from_error(e)
            )
        return ParseResult(text=text or "", is_valid=True, value=value)

    # ─── Sign ────────────────────────────────────────────────────────

    def _strip_sign(self, tokens: list[Token]) -> tuple[int, list[Token]]:
        first = tokens[0]
        entry = self.lexicon.lookup(first.word)
        if entry is None or entry.word_class is not WordClass.NEGATION:
            return 1, tokens
        if len(tokens) == 1:
            raise MisplacedWordError(
                f"{first.word!r} must be followed by a number (offset {first.offset})",
                first.offset,
                {"word": first.word, "word_class": entry.word_class.value},
            )
        return -1, tokens[1:]

    # ─── Scale Brackets ──────────────────────────────────────────────

    def _sum_brackets(self, tokens: list[Token]) -> int:
        """Consume scale brackets highest first and add up their values."""
        total = 0
        rest: Sequence[Token] = tokens
        last_bracket: Scale | None = None

        for scale in self.scale_table[:-1]:
            index = next((i for i, t in enumerate(rest) if t.word == scale.word), None)
            if index is None:
                logger.debug("No %s bracket", scale.bracket)
                continue

            phrase = rest[:index]
            if not phrase:
                marker = rest[index]
                raise EmptyScaleBracketError(
                    f"{marker.word!r} at offset {marker.offset} has no quantity before it",
                    marker.offset,
                    {"word": marker.word, "bracket": scale.bracket},
                )
            total += self._parse_bracket(phrase, scale)
            rest = rest[index + 1 :]
            last_bracket = scale

        ones = self.scale_table[-1]
        if last_bracket is not None and any(t.word in self._bracket_words for t in rest):
            raise TrailingGarbageError(
                f"Unexpected text {join_words(rest)!r} after the "
                f"{last_bracket.bracket} bracket (offset {rest[0].offset})",
                rest[0].offset,
                {"text": join_words(rest), "after": last_bracket.bracket},
            )
        if rest:
            total += self._parse_bracket(rest, ones)

        return total

    def _parse_bracket(self, phrase: Sequence[Token], scale: Scale) -> int:
        try:
            triple = parse_triple_tokens(phrase, self.lexicon)
        except NumberFormatError as e:
            raise e.in_bracket(scale.bracket) from e
        logger.debug("%s: %r -> %d", scale.bracket, join_words(phrase), triple)
        return triple * scale.multiplier

    # ─── Range ───────────────────────────────────────────────────────

    def _check_range(self, value: int) -> None:
        bounds = self.settings.int_range
        if bounds is None:
            return
        low, high = bounds
        if not low <= value <= high:
            raise OutOfRangeError(
                f"{value} does not fit in a signed {self.settings.int_bits}-bit integer",
                details={"value": value, "low": low, "high": high},
            )


# ─── Module-level API ────────────────────────────────────────────────


@lru_cache(maxsize=1)
def default_parser() -> NumberParser:
    """The shared parser built from environment settings."""
    return NumberParser()


def parse_number(text: str | None) -> int:
    """Parse an English number phrase into an int using the default parser.

    >>> parse_number("negative nine hundred eighty seven million")
    -987000000
    """
    return default_parser().parse(text)
