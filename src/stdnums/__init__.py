"""Normalization and validation of library standard numbers.

This package provides:
- Extraction (stdnums.extract) — candidate numbers from noisy text
- ISBN (stdnums.isbn) — check digits, 10/13 conversion, normalization
- ISSN (stdnums.issn) — check digits and normalization
- LCCN (stdnums.lccn) — reduction, serial padding, syntax validation
- Public API (stdnums.api) — type-dispatched and batch normalization
- Audit (stdnums.audit) — optional JSONL event logging
"""

__version__ = "1.0.0"
__license__ = "MIT"

from stdnums import isbn, issn, lccn
from stdnums._result_types import IdentifierResult, Validity
from stdnums.api import (
    IDENTIFIER_TYPES,
    UnknownIdentifierTypeError,
    index_values,
    normalize_identifier,
    normalize_values,
)
from stdnums.config import NormalizeConfig
from stdnums.extract import extract_number, reduce_to_basics

__all__ = [
    "__version__",
    "__license__",
    "IDENTIFIER_TYPES",
    "IdentifierResult",
    "NormalizeConfig",
    "UnknownIdentifierTypeError",
    "Validity",
    "extract_number",
    "index_values",
    "isbn",
    "issn",
    "lccn",
    "normalize_identifier",
    "normalize_values",
    "reduce_to_basics",
]
