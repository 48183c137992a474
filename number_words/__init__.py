"""
Number Words — strict parser for American-English integer phrases.

Architecture: Lexicon → Triple parser → Number parser (scale brackets + sign)
Philosophy:  One grammar, no guessing.  Anything it can't read is an error.
"""

from .exceptions import NumberFormatError
from .parser import NumberParser, parse_number
from .spelling import number_to_words
from .triple import parse_digit, parse_multiple_of_ten, parse_teen, parse_triple

__version__ = "1.0.0"

__all__ = [
    "NumberFormatError",
    "NumberParser",
    "number_to_words",
    "parse_digit",
    "parse_multiple_of_ten",
    "parse_number",
    "parse_teen",
    "parse_triple",
]
