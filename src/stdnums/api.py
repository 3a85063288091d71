"""Public API for normalizing standard numbers.

This module provides the high-level entry points for stdnums, enabling:
- Normalizing a single value for a named identifier type
- Normalizing a batch of values with optional audit logging
- Computing the values an index should store for a raw value
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from stdnums import isbn, issn, lccn
from stdnums._helpers import LCCN_URI_PREFIX, STDNUM_RE, WHITESPACE_RE
from stdnums._result_types import IdentifierResult, Validity, add_transform
from stdnums.config import IDENTIFIER_TYPES, NormalizeConfig

if TYPE_CHECKING:
    from stdnums.audit import AuditLogger

__all__ = [
    "IDENTIFIER_TYPES",
    "UnknownIdentifierTypeError",
    "index_values",
    "normalize_identifier",
    "normalize_values",
]


class UnknownIdentifierTypeError(ValueError):
    """Raised when an identifier type is not one of IDENTIFIER_TYPES."""

    def __init__(self, kind: str) -> None:
        """Initialize unknown type error.

        Parameters
        ----------
        kind : str
            The rejected identifier type.
        """
        super().__init__(f"Unknown identifier type {kind!r}; expected one of {', '.join(IDENTIFIER_TYPES)}")
        self.kind = kind


def normalize_identifier(value: str | None, kind: str) -> IdentifierResult:
    """Normalize a raw value as the given identifier type.

    Parameters
    ----------
    value : str | None
        Raw value, e.g. ``"ISBN: 0-306-40615-2"``.
    kind : str
        Identifier type: 'isbn', 'issn' or 'lccn' (case-insensitive).

    Returns
    -------
    IdentifierResult
        Status, canonical form, all indexable forms and applied transforms.

    Raises
    ------
    UnknownIdentifierTypeError
        If ``kind`` is not a supported identifier type.

    Examples
    --------
        >>> result = normalize_identifier("0-306-40615-2", "isbn")
        >>> result.forms
        ['9780306406157', '0306406152']
    """
    kind_key = kind.strip().lower() if isinstance(kind, str) else kind
    if kind_key == "isbn":
        status = isbn.check(value)
        norm = isbn.normalize(value)
        forms = isbn.all_normalized_values(value) if norm else []
    elif kind_key == "issn":
        status = issn.check(value)
        norm = issn.normalize(value)
        forms = [norm] if norm else []
    elif kind_key == "lccn":
        status = lccn.check(value)
        norm = lccn.normalize(value)
        forms = [norm] if norm else []
    else:
        raise UnknownIdentifierTypeError(kind)

    transforms = _get_transforms(value, kind_key, norm) if norm else []
    return IdentifierResult(
        kind=kind_key,
        raw=value,
        status=status,
        norm=norm,
        forms=forms,
        transforms=transforms,
    )


def normalize_values(
    values: Iterable[str | None],
    config: NormalizeConfig,
    *,
    audit_logger: AuditLogger | None = None,
) -> list[IdentifierResult]:
    """Normalize a sequence of raw values of one identifier type.

    Parameters
    ----------
    values : Iterable[str | None]
        Raw values, in order.
    config : NormalizeConfig
        Identifier type and batch options.
    audit_logger : AuditLogger | None, optional
        Receives batch and rejection events. If None, no logging.

    Returns
    -------
    list[IdentifierResult]
        One result per processed value, in input order. Blank values are
        omitted when ``config.skip_blank`` is set.

    Raises
    ------
    TypeError
        If a value is neither a string nor None.
    """
    values = list(values)
    counters = {"values_in": len(values), "valid": 0, "invalid": 0, "not_recognized": 0, "skipped": 0}
    start = time.perf_counter()

    if audit_logger:
        audit_logger.batch_started(config.kind, expected_values=len(values))

    results: list[IdentifierResult] = []
    for index, value in enumerate(values):
        if value is not None and not isinstance(value, str):
            message = f"value at index {index} is {type(value).__name__}, expected str"
            if audit_logger:
                audit_logger.error("TypeError", message, kind=config.kind, index=index)
            raise TypeError(message)

        if config.skip_blank and (value is None or not value.strip()):
            counters["skipped"] += 1
            continue

        result = normalize_identifier(value, config.kind)
        counters[result.status.value] += 1
        if audit_logger and result.status is not Validity.VALID:
            audit_logger.value_rejected(config.kind, index, value, result.status.value)
        results.append(result)

    if audit_logger:
        audit_logger.batch_finished(
            config.kind,
            duration_seconds=time.perf_counter() - start,
            counters=counters,
        )

    return results


def index_values(value: str | None, config: NormalizeConfig) -> list[str]:
    """Return the values an index should store for a raw identifier.

    Parameters
    ----------
    value : str | None
        Raw value.
    config : NormalizeConfig
        Identifier type; ``fallback_to_raw`` decides what happens to values
        that do not normalize.

    Returns
    -------
    list[str]
        Normalized forms, the stripped raw value as a fallback, or an
        empty list.
    """
    forms = normalize_identifier(value, config.kind).forms
    if forms:
        return forms
    if config.fallback_to_raw and value is not None and value.strip():
        return [value.strip()]
    return []


def _get_transforms(raw: str, kind: str, norm: str) -> list[dict[str, str]]:
    if kind == "lccn":
        return _get_lccn_transforms(raw)

    transforms: list[dict[str, str]] = []
    match = STDNUM_RE.search(raw)
    run = match.group(1)

    if match.start() > 0 or match.end() < len(raw):
        transforms.append(add_transform("extract_number", "Drop text around the number"))

    if "-" in run:
        transforms.append(add_transform("strip_hyphens", "Remove hyphens"))

    if run.endswith("x"):
        transforms.append(add_transform("upcase_check", "Uppercase trailing check character"))

    if kind == "isbn" and len(run.replace("-", "")) == 10:
        transforms.append(add_transform("convert_to_13", "Prefix 978 and recompute check digit"))

    return transforms


def _get_lccn_transforms(raw: str) -> list[dict[str, str]]:
    transforms: list[dict[str, str]] = []

    if WHITESPACE_RE.search(raw):
        transforms.append(add_transform("strip_whitespace", "Remove all whitespace"))

    unprefixed = WHITESPACE_RE.sub("", raw)
    if LCCN_URI_PREFIX in unprefixed:
        transforms.append(add_transform("strip_uri_prefix", f"Remove '{LCCN_URI_PREFIX}' prefix"))
        unprefixed = unprefixed.replace(LCCN_URI_PREFIX, "")

    if "/" in unprefixed:
        transforms.append(add_transform("strip_suffix", "Remove everything from the first '/'"))

    if "-" in unprefixed.split("/", 1)[0]:
        transforms.append(add_transform("pad_serial", "Zero-pad serial number to six digits"))

    return transforms
