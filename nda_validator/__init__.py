"""NDA submission validator.

Checks CSV data files against NDA data structure definitions before
submission:
- Plain CSV and submission-template framing
- Handedness and binary value standardization
- Required/recommended/unknown column classification
- Value range checks with header mapping and ignore overlays
- Similar-field suggestions for unknown columns
- Corrected submission-template export
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("nda-validator")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from nda_validator.application.validation_session import ValidationSession
from nda_validator.domain.entities.report import ValidationFailure, ValidationReport
from nda_validator.domain.entities.schema import DataStructure, Schema, SchemaField
from nda_validator.infrastructure.io.schema_loader import SchemaLoader

__all__ = [
    "__version__",
    # Session
    "ValidationSession",
    "ValidationReport",
    "ValidationFailure",
    # Schema
    "DataStructure",
    "Schema",
    "SchemaField",
    "SchemaLoader",
]
