"""ISBN validation, conversion, and normalization.

Handles both 10-character and 13-digit ISBNs. The canonical normalized form
is the 13-digit ISBN; the 10-character form is available for indexing
whenever the number carries the ``978`` prefix.

Check digit algorithms follow
http://en.wikipedia.org/wiki/International_Standard_Book_Number
"""

from ._result_types import Validity
from .extract import reduce_to_basics

__all__ = [
    "VALID_SIZES",
    "all_normalized_values",
    "at_least_trying",
    "check",
    "checkdigit",
    "convert_to_10",
    "convert_to_13",
    "is_valid",
    "normalize",
]

VALID_SIZES = (10, 13)

# Only Bookland 978 numbers have an ISBN-10 equivalent
ISBN10_COMPATIBLE_PREFIX = "978"


def at_least_trying(isbn: str | None) -> bool:
    """Does it even look like an ISBN?

    True if a 10- or 13-character candidate can be extracted, regardless
    of whether its check digit is correct.
    """
    return reduce_to_basics(isbn, VALID_SIZES) is not None


def checkdigit(isbn: str | None, preprocessed: bool = False) -> str | None:
    """Compute the check digit for a 10- or 13-character ISBN.

    Parameters
    ----------
    isbn : str | None
        The ISBN (cleaned up first unless ``preprocessed``).
    preprocessed : bool, optional
        Set to True if the value already went through ``reduce_to_basics``.

    Returns
    -------
    str | None
        The one-character check digit, or None if it's not an ISBN string.

    Raises
    ------
    ValueError
        If ``preprocessed`` is True and the value is not 10 or 13 long.
    """
    if not preprocessed:
        isbn = reduce_to_basics(isbn, VALID_SIZES)
        if isbn is None:
            return None

    if len(isbn) == 10:
        return _checkdigit_10(isbn)
    if len(isbn) == 13:
        return _checkdigit_13(isbn)
    raise ValueError(f"preprocessed ISBN must be 10 or 13 characters, got {isbn!r}")


def _checkdigit_10(isbn: str) -> str:
    total = sum(int(digit) * weight for weight, digit in enumerate(isbn[:9], start=1))
    check = total % 11
    return "X" if check == 10 else str(check)


def _checkdigit_13(isbn: str) -> str:
    total = sum(int(digit) * (3 if i % 2 else 1) for i, digit in enumerate(isbn[:12]))
    return str((10 - total % 10) % 10)


def is_valid(isbn: str | None, preprocessed: bool = False) -> bool | None:
    """Check whether the check digit is correct.

    Parameters
    ----------
    isbn : str | None
        The ISBN (cleaned up first unless ``preprocessed``).
    preprocessed : bool, optional
        Set to True if the value already went through ``reduce_to_basics``.

    Returns
    -------
    bool | None
        None for values that don't even look like ISBNs, False for
        plausible ones with a bad check digit, True otherwise.
    """
    if isbn is None:
        return None
    if not preprocessed:
        isbn = reduce_to_basics(isbn, VALID_SIZES)
        if isbn is None:
            return None
    return isbn[-1] == checkdigit(isbn, preprocessed=True)


def check(isbn: str | None) -> Validity:
    """Tri-state validity of a raw ISBN as a ``Validity``."""
    return Validity.from_flag(is_valid(isbn))


def convert_to_13(isbn: str | None) -> str | None:
    """Convert a valid ISBN to its 13-digit form.

    Valid 13-digit numbers pass through; valid 10-character numbers get a
    ``978`` prefix and a recomputed check digit.

    Returns
    -------
    str | None
        The 13-digit ISBN, or None if the input isn't a valid ISBN.
    """
    isbn = reduce_to_basics(isbn, VALID_SIZES)
    if isbn is None or not is_valid(isbn, preprocessed=True):
        return None
    if len(isbn) == 13:
        return isbn

    prefix = ISBN10_COMPATIBLE_PREFIX + isbn[:9]
    return prefix + _checkdigit_13(prefix + "0")


def convert_to_10(isbn: str | None) -> str | None:
    """Convert an ISBN to its 10-character form.

    10-character numbers pass through. 13-digit numbers are converted only
    when they start with ``978``; anything else (e.g. ``979``) has no
    ISBN-10 equivalent.

    Returns
    -------
    str | None
        The 10-character ISBN, or None if there is none.
    """
    isbn = reduce_to_basics(isbn, VALID_SIZES)
    if isbn is None:
        return None
    if len(isbn) == 10:
        return isbn
    if not isbn.startswith(ISBN10_COMPATIBLE_PREFIX):
        return None

    body = isbn[3:12]
    return body + _checkdigit_10(body + "0")


def normalize(isbn: str | None) -> str | None:
    """Normalize to a valid 13-digit ISBN, or None on failure."""
    return convert_to_13(isbn)


def all_normalized_values(isbn: str | None) -> list[str]:
    """Return the ISBN-13 and ISBN-10 forms of a value, in that order.

    Only one value comes back when the other form doesn't exist (a 979
    number, or a 10-character number whose check digit is wrong), and an
    empty list when nothing ISBN-shaped can be extracted.

    Examples
    --------
    Index the normalized values, or the original value if there are none:

        >>> norms = all_normalized_values(raw_isbn)
        >>> doc["isbn"] = norms or [raw_isbn]
    """
    isbn = reduce_to_basics(isbn, VALID_SIZES)
    if isbn is None:
        return []

    if len(isbn) == 10:
        candidates = [convert_to_13(isbn), isbn]
    else:
        candidates = [isbn, convert_to_10(isbn)]
    return [value for value in candidates if value is not None]
