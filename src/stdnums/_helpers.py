"""Compiled regex patterns and constants shared by the identifier modules.

Patterns are compiled once at import time and hold no match state, so
every function using them stays reentrant.
"""

import re

# Leftmost run of digits/hyphens at least 7 long, optionally followed by a
# single check letter. The shortest real candidate is an ISSN: 7 digits plus
# a check character.
STDNUM_RE = re.compile(r"([0-9][0-9\-]{6,}[xX]?)")

ASCII_DIGITS_RE = re.compile(r"[0-9]+")
ANY_DIGIT_RE = re.compile(r"[0-9]")
WHITESPACE_RE = re.compile(r"\s", re.ASCII)

LCCN_URI_PREFIX = "http://lccn.loc.gov/"
LCCN_SERIAL_WIDTH = 6
LCCN_BODY_LENGTH = 8

# Leading-character rules keyed by total normalized length, from
# http://www.loc.gov/marc/lccn-namespace.html#syntax
LCCN_PREFIX_RULES = {
    8: re.compile(r""),
    9: re.compile(r"[A-Za-z]"),
    10: re.compile(r"[0-9]{2}|[A-Za-z]{2}"),
    11: re.compile(r"[A-Za-z](?:[0-9]{2}|[A-Za-z]{2})"),
    12: re.compile(r"[A-Za-z]{2}[0-9]{2}"),
}


def is_ascii_digits(text: str) -> bool:
    """Return True if ``text`` is non-empty and made only of ASCII digits."""
    return ASCII_DIGITS_RE.fullmatch(text) is not None
