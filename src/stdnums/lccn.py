"""LCCN normalization and validation.

Library of Congress Control Numbers do not go through the shared number
extractor: they may start with letters, and their structure depends on
position. Rules follow http://www.loc.gov/marc/lccn-namespace.html#syntax
"""

from ._helpers import (
    ANY_DIGIT_RE,
    LCCN_BODY_LENGTH,
    LCCN_PREFIX_RULES,
    LCCN_SERIAL_WIDTH,
    LCCN_URI_PREFIX,
    WHITESPACE_RE,
    is_ascii_digits,
)
from ._result_types import Validity

__all__ = ["check", "is_valid", "normalize", "reduce_to_basic"]


def reduce_to_basic(lccn: str) -> str:
    """Get a string ready for processing as an LCCN.

    Drops all whitespace and the ``http://lccn.loc.gov/`` URI prefix, then
    everything from the first '/' on (revision and supplement codes).
    """
    reduced = WHITESPACE_RE.sub("", lccn)
    reduced = reduced.replace(LCCN_URI_PREFIX, "")
    return reduced.split("/", 1)[0]


def normalize(lccn: str | None) -> str | None:
    """Normalize a raw LCCN.

    A hyphen separates the year part from the serial number; the serial is
    left-padded with zeros to six digits.

    Parameters
    ----------
    lccn : str | None
        The possible LCCN, e.g. ``"n78-890351"`` or ``"75-425165//r75"``.

    Returns
    -------
    str | None
        The normalized LCCN, or None if it looks malformed.

    Examples
    --------
        >>> normalize("85-2 ")
        '85000002'
    """
    if lccn is None:
        return None

    reduced = reduce_to_basic(lccn)
    prefix, hyphen, serial = reduced.partition("-")
    if hyphen and serial:
        if not is_ascii_digits(serial):
            return None
        reduced = prefix + serial.lstrip("0").rjust(LCCN_SERIAL_WIDTH, "0")

    if is_valid(reduced, preprocessed=True):
        return reduced
    return None


def is_valid(lccn: str | None, preprocessed: bool = False) -> bool:
    """Check LCCN syntax.

    A normalized LCCN is 8 to 12 characters long and its rightmost eight
    characters are digits. Depending on the length, the leading characters
    must be:

    - 9: one letter
    - 10: two digits or two letters
    - 11: a letter, then two digits or two letters
    - 12: two letters, then digits

    Parameters
    ----------
    lccn : str | None
        The LCCN to validate.
    preprocessed : bool, optional
        Set to True if the value has already been normalized.

    Returns
    -------
    bool
        Whether the syntax seems ok.
    """
    if not preprocessed:
        lccn = normalize(lccn)
    if not lccn:
        return False

    clean = lccn.replace("-", "")
    if len(clean) < LCCN_BODY_LENGTH or not is_ascii_digits(clean[-LCCN_BODY_LENGTH:]):
        return False

    rule = LCCN_PREFIX_RULES.get(len(clean))
    return rule is not None and rule.match(clean) is not None


def check(lccn: str | None) -> Validity:
    """Tri-state validity of a raw LCCN.

    Values with no digit at all after reduction are not recognized as LCCNs.
    """
    if lccn is None or not ANY_DIGIT_RE.search(reduce_to_basic(lccn)):
        return Validity.NOT_RECOGNIZED
    return Validity.VALID if is_valid(lccn) else Validity.INVALID
