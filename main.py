#!/usr/bin/env python3
"""
Number Words — Entry Point
==========================

Reads an English number phrase from standard input (to end of stream) and
prints its integer value.

Usage:
    echo "negative forty two" | python main.py      # prints -42
    python main.py < phrase.txt
    NUMBER_WORDS_LOG_LEVEL=DEBUG python main.py     # parser trace on stderr

Exit status:
    0   the integer is on stdout
    7   the phrase is not a valid number (message on stderr), or an
        unrelated failure (reported as such on stderr)
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from number_words.config import load_settings
from number_words.exceptions import NumberFormatError
from number_words.parser import parse_number

EXIT_OK = 0
EXIT_INVALID_NUMBER = 7


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_RESET = "\033[0m"


def _print_error(message: str) -> None:
    """Write an error line to stderr, red when stderr is a terminal."""
    if sys.stderr.isatty():
        message = f"{_RED}{message}{_RESET}"
    print(message, file=sys.stderr)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ─── Main ────────────────────────────────────────────────────────────


def main() -> None:
    """Parse stdin and exit with the status described above."""
    load_dotenv()

    try:
        _configure_logging(load_settings().log_level)
        text = sys.stdin.read()
        result = parse_number(text)
    except NumberFormatError as e:
        _print_error(str(e))
        sys.exit(EXIT_INVALID_NUMBER)
    except Exception as e:  # noqa: BLE001
        _print_error(f"Error unrelated to number format: {e}")
        sys.exit(EXIT_INVALID_NUMBER)

    print(result)
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
