"""
Triple parser: one scale bracket's worth of words, a value in [0, 999].

Grammar (left to right, no backtracking):

    triple := [digit "hundred"] ( teen | [tens-multiple] [digit] )

The caller strips the sign and the scale word.  "zero" is never part of a
triple; it is only accepted as a whole number by the number parser.

The single-word helpers (``parse_digit``, ``parse_teen``,
``parse_multiple_of_ten``) validate one word against one word class.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Sequence

from .exceptions import EmptyInputError, MisplacedWordError, UnrecognizedWordError
from .lexicon import HUNDRED, Lexicon, LexiconEntry, WordClass, build_lexicon

_WORD_RE = re.compile(r"\S+")


# ─── Tokens ──────────────────────────────────────────────────────────


class Token(NamedTuple):
    """A lowercased word and its character offset in the original input."""

    word: str
    offset: int


def tokenize(text: str) -> list[Token]:
    """Split on runs of whitespace, lowercasing each word."""
    return [Token(m.group().lower(), m.start()) for m in _WORD_RE.finditer(text)]


def join_words(tokens: Sequence[Token]) -> str:
    return " ".join(t.word for t in tokens)


# ─── Diagnostics Helpers ─────────────────────────────────────────────


def classify(token: Token, lexicon: Lexicon) -> LexiconEntry:
    """Look a token up, raising UnrecognizedWordError when it is not a number word."""
    entry = lexicon.lookup(token.word)
    if entry is None:
        raise UnrecognizedWordError(
            f"Unrecognized number word {token.word!r} at offset {token.offset}",
            token.offset,
            {"word": token.word},
        )
    return entry


def misplaced(
    token: Token, entry: LexiconEntry, previous: Optional[Token] = None
) -> MisplacedWordError:
    """Build the error for a known word in a position the grammar forbids."""
    if entry.word_class is WordClass.ZERO:
        reason = f"{token.word!r} is only valid as a whole number"
    elif entry.word_class is WordClass.NEGATION:
        reason = f"{token.word!r} is only valid at the start of a number"
    elif entry.word == HUNDRED and (previous is None or previous.word == HUNDRED):
        reason = f"{token.word!r} must follow a digit"
    elif previous is None:
        reason = f"{token.word!r} cannot start this phrase"
    else:
        reason = f"{token.word!r} cannot follow {previous.word!r}"
    return MisplacedWordError(
        f"{reason} (offset {token.offset})",
        token.offset,
        {"word": token.word, "word_class": entry.word_class.value},
    )


# ─── Triple Grammar ──────────────────────────────────────────────────


def parse_triple_tokens(tokens: Sequence[Token], lexicon: Lexicon) -> int:
    """Parse already-tokenized words into a value in [0, 999].

    Unknown words are reported before misplaced ones so a typo is never
    described as a grammar problem.
    """
    if not tokens:
        raise EmptyInputError("Expected a number from one to nine hundred ninety nine")

    entries = [classify(t, lexicon) for t in tokens]
    count = len(tokens)
    pos = 0
    total = 0

    # [digit "hundred"]
    if (
        count >= 2
        and entries[0].word_class is WordClass.DIGIT
        and entries[1].word == HUNDRED
    ):
        total += entries[0].value * 100
        pos = 2

    # teen: must be the last word
    if pos < count and entries[pos].word_class is WordClass.TEEN:
        total += entries[pos].value
        pos += 1
        if pos < count:
            raise misplaced(tokens[pos], entries[pos], tokens[pos - 1])
        return total

    # [tens-multiple] [digit]
    if pos < count and entries[pos].word_class is WordClass.TENS_MULTIPLE:
        total += entries[pos].value
        pos += 1
    if pos < count and entries[pos].word_class is WordClass.DIGIT:
        total += entries[pos].value
        pos += 1

    if pos < count:
        previous = tokens[pos - 1] if pos else None
        raise misplaced(tokens[pos], entries[pos], previous)

    return total


def parse_triple(text: str, lexicon: Lexicon | None = None) -> int:
    """Parse "four hundred nine" style phrases into [0, 999].

    Raises:
        NumberFormatError: On empty input, unknown words, or bad word order.
    """
    if lexicon is None:
        lexicon = build_lexicon()
    return parse_triple_tokens(tokenize(text or ""), lexicon)


# ─── Single Words ────────────────────────────────────────────────────


def _parse_word(text: str, word_class: WordClass, lexicon: Lexicon | None) -> int:
    tokens = tokenize(text or "")
    if not tokens:
        raise EmptyInputError(f"Expected a {word_class.label} word, found nothing")

    if lexicon is None:
        lexicon = build_lexicon()
    entry = classify(tokens[0], lexicon)
    if entry.word_class is not word_class:
        raise MisplacedWordError(
            f"{tokens[0].word!r} is a {entry.word_class.label} word, "
            f"expected a {word_class.label} word",
            tokens[0].offset,
            {"word": tokens[0].word, "word_class": entry.word_class.value},
        )
    if len(tokens) > 1:
        extra = classify(tokens[1], lexicon)
        raise misplaced(tokens[1], extra, tokens[0])
    return entry.value


def parse_digit(text: str, lexicon: Lexicon | None = None) -> int:
    """Map "one" .. "nine" to 1 .. 9.  "zero" is rejected (see ``parse_number``)."""
    return _parse_word(text, WordClass.DIGIT, lexicon)


def parse_teen(text: str, lexicon: Lexicon | None = None) -> int:
    """Map "ten" .. "nineteen" to 10 .. 19."""
    return _parse_word(text, WordClass.TEEN, lexicon)


def parse_multiple_of_ten(text: str, lexicon: Lexicon | None = None) -> int:
    """Map "twenty" .. "ninety" to 20, 30, ... 90."""
    return _parse_word(text, WordClass.TENS_MULTIPLE, lexicon)
