"""
The closed vocabulary of American-English number words.

Every word the parser understands lives here, tagged with exactly one
grammatical class.  The class, not the value, decides where a word may
appear:

    ZERO            zero, naught            whole-number only
    DIGIT           one .. nine             after "hundred", after a tens word
    TEEN            ten .. nineteen         never followed by anything
    TENS_MULTIPLE   twenty .. ninety        may be followed by a digit
    SCALE           hundred, thousand, ...  multiplicative
    NEGATION        minus, negative         leading sign only

The scale table is ordered highest power first.  Supporting a larger
magnitude means prepending a row; the parsing code does not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Optional


# ─── Word Classes ────────────────────────────────────────────────────


class WordClass(str, Enum):
    """Grammatical role of a lexicon word."""

    ZERO = "ZERO"
    DIGIT = "DIGIT"
    TEEN = "TEEN"
    TENS_MULTIPLE = "TENS_MULTIPLE"
    SCALE = "SCALE"
    NEGATION = "NEGATION"

    @property
    def label(self) -> str:
        return self.value.lower().replace("_", " ")


@dataclass(frozen=True)
class LexiconEntry:
    """One recognized word."""

    word: str
    value: int
    word_class: WordClass


@dataclass(frozen=True)
class Scale:
    """A power-of-one-thousand bracket ("million" is 1000 ** 2)."""

    word: str  # Empty for the trailing ones bracket
    exponent: int
    bracket: str  # Name used in diagnostics, e.g. "millions"

    @property
    def multiplier(self) -> int:
        return 1000**self.exponent


# ─── Word Tables ─────────────────────────────────────────────────────

ZERO_WORDS: tuple[str, ...] = ("zero", "naught")

DIGIT_WORDS: tuple[str, ...] = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)

TEEN_WORDS: tuple[str, ...] = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

# Index i holds the word for (i + 2) * 10
TENS_WORDS: tuple[str, ...] = (
    "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

NEGATION_WORDS: tuple[str, ...] = ("minus", "negative")

HUNDRED = "hundred"


# ─── Scale Tables ────────────────────────────────────────────────────

SCALE_TABLE: tuple[Scale, ...] = (
    Scale("million", 2, "millions"),
    Scale("thousand", 1, "thousands"),
    Scale("", 0, "ones"),
)

# Scales above the default table, lowest first.  "billion" is the ceiling.
_HIGHER_SCALES: tuple[Scale, ...] = (Scale("billion", 3, "billions"),)

SCALE_WORDS: tuple[str, ...] = tuple(
    s.word for s in reversed(_HIGHER_SCALES) if s.word
) + tuple(s.word for s in SCALE_TABLE if s.word)


def build_scale_table(max_scale: str = "million") -> tuple[Scale, ...]:
    """Return the scale table topped by ``max_scale``.

    Raises:
        ValueError: If ``max_scale`` is not a known scale word.
    """
    table = SCALE_TABLE
    if max_scale == table[0].word:
        return table
    for higher in _HIGHER_SCALES:
        table = (higher,) + table
        if higher.word == max_scale:
            return table
    raise ValueError(
        f"Unknown scale word {max_scale!r}; expected one of {', '.join(SCALE_WORDS)}"
    )


# ─── Lexicon ─────────────────────────────────────────────────────────


class Lexicon:
    """Read-only word → entry mapping.

    Built once per scale table (see ``build_lexicon``) and shared by every
    parse call.
    """

    def __init__(self, entries: Iterable[LexiconEntry]):
        table: dict[str, LexiconEntry] = {}
        for entry in entries:
            if entry.word in table:
                raise ValueError(f"Duplicate lexicon word: {entry.word!r}")
            table[entry.word] = entry
        self._entries = MappingProxyType(table)

    def lookup(self, word: str) -> Optional[LexiconEntry]:
        """Exact-match lookup; the caller lowercases.  None when unknown."""
        return self._entries.get(word)

    def __len__(self) -> int:
        return len(self._entries)


def build_lexicon(scale_table: tuple[Scale, ...] | None = None) -> Lexicon:
    """Return the shared lexicon for a scale table (the default table when None)."""
    return _cached_lexicon(SCALE_TABLE if scale_table is None else scale_table)


@lru_cache(maxsize=None)
def _cached_lexicon(scale_table: tuple[Scale, ...]) -> Lexicon:
    entries: list[LexiconEntry] = []
    entries += [LexiconEntry(w, 0, WordClass.ZERO) for w in ZERO_WORDS]
    entries += [
        LexiconEntry(w, i, WordClass.DIGIT) for i, w in enumerate(DIGIT_WORDS, start=1)
    ]
    entries += [
        LexiconEntry(w, i, WordClass.TEEN) for i, w in enumerate(TEEN_WORDS, start=10)
    ]
    entries += [
        LexiconEntry(w, (i + 2) * 10, WordClass.TENS_MULTIPLE)
        for i, w in enumerate(TENS_WORDS)
    ]
    entries.append(LexiconEntry(HUNDRED, 100, WordClass.SCALE))
    entries += [
        LexiconEntry(s.word, s.multiplier, WordClass.SCALE)
        for s in scale_table
        if s.word
    ]
    entries += [LexiconEntry(w, -1, WordClass.NEGATION) for w in NEGATION_WORDS]
    return Lexicon(entries)


def lookup(word: str) -> Optional[LexiconEntry]:
    """Look a word up in the default lexicon."""
    return build_lexicon().lookup(word)
