"""ISSN validation and normalization."""

from ._result_types import Validity
from .extract import reduce_to_basics

__all__ = ["VALID_SIZE", "at_least_trying", "check", "checkdigit", "is_valid", "normalize"]

VALID_SIZE = 8


def at_least_trying(issn: str | None) -> bool:
    """Does it even look like an ISSN?"""
    return reduce_to_basics(issn, VALID_SIZE) is not None


def checkdigit(issn: str | None, preprocessed: bool = False) -> str | None:
    """Compute the check digit of an ISSN.

    The first seven digits are weighted 8 down to 2 and summed. A sum
    divisible by 11 gives '0'; otherwise the check is ``11 - (sum mod 11)``
    with 10 written as 'X'.

    Parameters
    ----------
    issn : str | None
        The ISSN (cleaned up first unless ``preprocessed``).
    preprocessed : bool, optional
        Set to True if the value already went through ``reduce_to_basics``.

    Returns
    -------
    str | None
        The one-character check digit, or None if it's not an ISSN string.

    Raises
    ------
    ValueError
        If ``preprocessed`` is True and the value is not 8 characters long.
    """
    if not preprocessed:
        issn = reduce_to_basics(issn, VALID_SIZE)
        if issn is None:
            return None
    elif len(issn) != VALID_SIZE:
        raise ValueError(f"preprocessed ISSN must be {VALID_SIZE} characters, got {issn!r}")

    total = sum(int(digit) * (8 - i) for i, digit in enumerate(issn[:7]))
    remainder = total % 11
    if remainder == 0:
        return "0"

    check_value = 11 - remainder
    return "X" if check_value == 10 else str(check_value)


def is_valid(issn: str | None, preprocessed: bool = False) -> bool | None:
    """Check whether the check digit is correct.

    Returns
    -------
    bool | None
        None for values that don't even look like ISSNs, False for
        plausible ones with a bad check digit, True otherwise.
    """
    if not preprocessed:
        issn = reduce_to_basics(issn, VALID_SIZE)
    if issn is None:
        return None
    return issn[-1] == checkdigit(issn, preprocessed=True)


def check(issn: str | None) -> Validity:
    """Tri-state validity of a raw ISSN as a ``Validity``."""
    return Validity.from_flag(is_valid(issn))


def normalize(issn: str | None) -> str | None:
    """Remove the hyphens, uppercase the X, and return the ISSN if valid.

    Returns
    -------
    str | None
        The 8-character ISSN, or None if it is missing or has a bad check digit.
    """
    issn = reduce_to_basics(issn, VALID_SIZE)
    if issn is not None and is_valid(issn, preprocessed=True):
        return issn
    return None
