"""
Render an integer as the canonical phrase the parser accepts.

    -987654321 -> "negative nine hundred eighty seven million six hundred
                   fifty four thousand three hundred twenty one"

No hyphens and no "and": tens and ones are separate words, exactly as the
grammar expects them.
"""

from __future__ import annotations

from .exceptions import OutOfRangeError
from .lexicon import (
    DIGIT_WORDS,
    HUNDRED,
    NEGATION_WORDS,
    SCALE_TABLE,
    TEEN_WORDS,
    TENS_WORDS,
    ZERO_WORDS,
    Scale,
)


def _spell_triple(value: int) -> list[str]:
    words: list[str] = []
    hundreds, rest = divmod(value, 100)
    if hundreds:
        words += [DIGIT_WORDS[hundreds - 1], HUNDRED]
    if 10 <= rest < 20:
        words.append(TEEN_WORDS[rest - 10])
    else:
        tens, ones = divmod(rest, 10)
        if tens:
            words.append(TENS_WORDS[tens - 2])
        if ones:
            words.append(DIGIT_WORDS[ones - 1])
    return words


def number_to_words(value: int, scale_table: tuple[Scale, ...] = SCALE_TABLE) -> str:
    """Spell ``value`` using the scale words in ``scale_table``.

    Raises:
        OutOfRangeError: If ``value`` needs a scale the table does not have.
    """
    limit = scale_table[0].multiplier * 1000 - 1
    if abs(value) > limit:
        raise OutOfRangeError(
            f"{value} is outside [-{limit}, {limit}]",
            details={"value": value, "limit": limit},
        )
    if value == 0:
        return ZERO_WORDS[0]

    words: list[str] = [NEGATION_WORDS[1]] if value < 0 else []
    remaining = abs(value)
    for scale in scale_table:
        triple, remaining = divmod(remaining, scale.multiplier)
        if triple:
            words += _spell_triple(triple)
            if scale.word:
                words.append(scale.word)
    return " ".join(words)
