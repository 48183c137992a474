"""
Custom exception hierarchy for number-phrase parsing.

Each exception type maps to one category of malformed input, so callers can
tell an unknown word from a word in the wrong place without string matching.
All of them share one base class, which the host catches as "the input is
not a number".
"""

from __future__ import annotations


class NumberFormatError(Exception):
    """Base exception for every rejected number phrase.

    Attributes:
        code: Machine-readable category, e.g. "MISPLACED_WORD".
        offset: Character offset of the offending word in the original
            input, or None when the failure has no single location.
        details: Extra context (the offending word, the bracket name, ...).
    """

    code = "NUMBER_FORMAT"

    def __init__(
        self, message: str, offset: int | None = None, details: dict | None = None
    ):
        self.offset = offset
        self.details = details or {}
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def in_bracket(self, bracket: str) -> NumberFormatError:
        """Return a copy of this error with the failing scale bracket named.

        The inner message, offset and details survive; only context is added.
        """
        return type(self)(
            f"Invalid {bracket} bracket: {self.message}",
            self.offset,
            {**self.details, "bracket": bracket},
        )


class EmptyInputError(NumberFormatError):
    """The input is missing, empty, or only whitespace."""

    code = "EMPTY_INPUT"


class UnrecognizedWordError(NumberFormatError):
    """A word is not in the number lexicon."""

    code = "UNRECOGNIZED_WORD"


class MisplacedWordError(NumberFormatError):
    """A known number word appears where the grammar does not allow it."""

    code = "MISPLACED_WORD"


class EmptyScaleBracketError(NumberFormatError):
    """A scale word ("thousand", "million") has no quantity before it."""

    code = "EMPTY_SCALE_BRACKET"


class TrailingGarbageError(NumberFormatError):
    """Words remain after every scale bracket has been consumed."""

    code = "TRAILING_GARBAGE"


class OutOfRangeError(NumberFormatError):
    """The value does not fit the configured integer width or scale table."""

    code = "OUT_OF_RANGE"
