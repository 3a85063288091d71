"""Candidate number extraction shared by ISBN and ISSN.

Pulls the most plausible identifier out of free text: the first run of
digits and hyphens (optionally ending in a check letter), with the hyphens
removed and the check letter uppercased.
"""

from collections.abc import Iterable

from ._helpers import STDNUM_RE

__all__ = ["extract_number", "reduce_to_basics"]


def extract_number(raw: str) -> str | None:
    """Extract the first identifier-shaped run from a string.

    Parameters
    ----------
    raw : str
        Text that may contain an ISBN/ISSN, e.g. ``"ISBN: 0-306-40615-2 (pbk.)"``.

    Returns
    -------
    str | None
        Digits (plus an optional trailing ``X``) with hyphens removed, or
        None if nothing in the string looks like a number.

    Examples
    --------
        >>> extract_number("ISBN13: 978-0-306-40615-7")
        '9780306406157'
        >>> extract_number("12345") is None
        True
    """
    match = STDNUM_RE.search(raw)
    if match is None:
        return None
    return match.group(1).replace("-", "").upper()


def reduce_to_basics(
    raw: str | None,
    valid_sizes: int | Iterable[int] | None = None,
) -> str | None:
    """Extract a candidate number and check it against the allowed sizes.

    Parameters
    ----------
    raw : str | None
        The raw string containing (hopefully) an ISBN/ISSN.
    valid_sizes : int | Iterable[int] | None, optional
        Acceptable candidate length(s), e.g. ``8`` for ISSN or ``(10, 13)``
        for ISBN. None accepts any length.

    Returns
    -------
    str | None
        The reduced number, or None if there is no match of the right size.
    """
    if raw is None:
        return None

    num = extract_number(raw)
    if num is None:
        return None

    if valid_sizes is None:
        return num

    sizes = {valid_sizes} if isinstance(valid_sizes, int) else set(valid_sizes)
    if len(num) in sizes:
        return num
    return None
