"""Normalization configuration dataclass."""

from dataclasses import asdict, dataclass
from typing import Any

IDENTIFIER_TYPES = ("isbn", "issn", "lccn")


@dataclass
class NormalizeConfig:
    """Configuration for batch normalization and indexing.

    Attributes
    ----------
    kind : str
        Identifier type: 'isbn', 'issn' or 'lccn' (case-insensitive).
    fallback_to_raw : bool
        Index the stripped raw value when no normalized form exists.
    skip_blank : bool
        Skip None and whitespace-only values in batch normalization.
    """

    kind: str
    fallback_to_raw: bool = False
    skip_blank: bool = True

    def __post_init__(self) -> None:
        """Normalize and validate the identifier type."""
        if not isinstance(self.kind, str):
            raise ValueError(f"kind must be a string, got {type(self.kind).__name__}")

        self.kind = self.kind.strip().lower()
        if self.kind not in IDENTIFIER_TYPES:
            raise ValueError(f"kind must be one of {', '.join(IDENTIFIER_TYPES)}, got {self.kind!r}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
