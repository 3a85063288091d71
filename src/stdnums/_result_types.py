"""Result types for identifier normalization.

These replace bare ``bool | None`` tri-states and ad hoc tuples with named,
typed structures.
"""

from dataclasses import dataclass, field
from enum import Enum

# Normalization version recorded on every transform
NORMALIZATION_VERSION = "1.0.0"


class Validity(Enum):
    """Outcome of checking a raw value against an identifier format.

    Attributes
    ----------
    NOT_RECOGNIZED
        Nothing in the input resembles the identifier.
    INVALID
        A plausible candidate was found but fails its checksum or grammar.
    VALID
        Candidate found and passes all checks.
    """

    NOT_RECOGNIZED = "not_recognized"
    INVALID = "invalid"
    VALID = "valid"

    @classmethod
    def from_flag(cls, flag: bool | None) -> "Validity":
        """Map an ``is_valid`` style tri-state onto the enum."""
        if flag is None:
            return cls.NOT_RECOGNIZED
        return cls.VALID if flag else cls.INVALID


@dataclass(frozen=True)
class IdentifierResult:
    """Result of normalizing one raw value.

    Attributes
    ----------
    kind : str
        Identifier type ('isbn', 'issn' or 'lccn').
    raw : str | None
        Value as received.
    status : Validity
        Tri-state validity verdict.
    norm : str | None
        Canonical normalized form, None unless valid.
    forms : list[str]
        Every normalized form worth indexing, canonical form first.
    transforms : list[dict[str, str]]
        Cleanup steps applied to the raw value.
    """

    kind: str
    raw: str | None
    status: Validity
    norm: str | None
    forms: list[str] = field(default_factory=list)
    transforms: list[dict[str, str]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Whether the value normalized successfully."""
        return self.status is Validity.VALID


def add_transform(name: str, notes: str) -> dict[str, str]:
    """Create a transform dict.

    Parameters
    ----------
    name : str
        Transform name (e.g., 'strip_hyphens').
    notes : str
        Description of what the transform does.

    Returns
    -------
    dict[str, str]
        Transform dict with name, version, and notes.
    """
    return {
        "name": name,
        "version": NORMALIZATION_VERSION,
        "notes": notes,
    }
