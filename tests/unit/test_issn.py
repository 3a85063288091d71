"""Tests for ISSN check digits and normalization."""

import pytest

from stdnums import issn
from stdnums._result_types import Validity


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("0378-5955", "5"),
        ("0317-8471", "1"),
        ("2434-561X", "X"),
        ("1050-124X", "X"),
        ("0011-0000", "0"),
    ],
)
def test_checkdigit(raw: str, expected: str) -> None:
    """Test weighted mod-11 check digit, including 'X' and zero remainder."""
    assert issn.checkdigit(raw) == expected


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["12345", "0-306-40615-2", "no issn", None])
def test_checkdigit_not_an_issn(raw: str | None) -> None:
    """Test check digit is None when no 8-character candidate extracts."""
    assert issn.checkdigit(raw) is None


@pytest.mark.unit
def test_checkdigit_preprocessed_wrong_size_raises() -> None:
    """Test preprocessed values of the wrong size are a programming error."""
    with pytest.raises(ValueError, match="8 characters"):
        issn.checkdigit("0306406152", preprocessed=True)


@pytest.mark.unit
def test_is_valid_three_outcomes() -> None:
    """Test valid, invalid, and not-an-ISSN are distinguishable."""
    assert issn.is_valid("0378-5955") is True
    assert issn.is_valid("ISSN 0378-5955 (print)") is True
    assert issn.is_valid("2434-561x") is True
    assert issn.is_valid("0378-5954") is False
    assert issn.is_valid("12345") is None
    assert issn.is_valid(None) is None


@pytest.mark.unit
def test_check_returns_validity() -> None:
    """Test check() maps the tri-state onto Validity."""
    assert issn.check("0378-5955") is Validity.VALID
    assert issn.check("0378-5954") is Validity.INVALID
    assert issn.check("0-306-40615-2") is Validity.NOT_RECOGNIZED


@pytest.mark.unit
def test_normalize() -> None:
    """Test normalization strips hyphens, uppercases X, and gates on checksum."""
    assert issn.normalize("0378-5955") == "03785955"
    assert issn.normalize("ISSN: 2434-561x") == "2434561X"
    assert issn.normalize("0378-5954") is None
    assert issn.normalize("12345") is None
    assert issn.normalize(None) is None


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["0378-5955", "2434-561X", "0011-0000"])
def test_normalize_idempotent(raw: str) -> None:
    """Test normalizing a normalized ISSN returns it unchanged."""
    once = issn.normalize(raw)
    assert once is not None
    assert issn.normalize(once) == once


@pytest.mark.unit
def test_at_least_trying() -> None:
    """Test plausibility is true for any 8-character candidate."""
    assert issn.at_least_trying("0378-5955") is True
    assert issn.at_least_trying("0378-5954") is True
    assert issn.at_least_trying("0-306-40615-2") is False
    assert issn.at_least_trying("no issn") is False
    assert issn.at_least_trying(None) is False
