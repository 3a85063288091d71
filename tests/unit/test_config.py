"""Tests for normalization configuration."""

import pytest

from stdnums.config import IDENTIFIER_TYPES, NormalizeConfig


@pytest.mark.unit
def test_config_defaults() -> None:
    """Test default options."""
    config = NormalizeConfig(kind="isbn")

    assert config.fallback_to_raw is False
    assert config.skip_blank is True


@pytest.mark.unit
@pytest.mark.parametrize("kind", ["ISBN", " issn ", "Lccn"])
def test_config_kind_normalized(kind: str) -> None:
    """Test identifier type is stripped and lowercased."""
    assert NormalizeConfig(kind=kind).kind in IDENTIFIER_TYPES


@pytest.mark.unit
@pytest.mark.parametrize("kind", ["doi", "", 8])
def test_config_invalid_kind(kind: object) -> None:
    """Test unknown identifier types are rejected."""
    with pytest.raises(ValueError, match="kind must be"):
        NormalizeConfig(kind=kind)


@pytest.mark.unit
def test_config_to_dict() -> None:
    """Test dictionary conversion."""
    config = NormalizeConfig(kind="LCCN", fallback_to_raw=True)

    assert config.to_dict() == {"kind": "lccn", "fallback_to_raw": True, "skip_blank": True}
