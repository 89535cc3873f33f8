"""Building blocks for packaging Hyacinth access copies into a zip.

This package contains the modules used by `zipbuild.py`:
- headers: required column check for the export CSV
- records: filename derivation and the validated location -> name mapping
- archive: zip assembly from a mapping
- map_export: CSV/NDJSON rename map of a mapping
- settings: persistent run settings (policies, compression, map format)
- ui: interactive prompts and path helpers
- pipeline: one full run (preflight, validate, map, confirm, write)
"""
from .errors import (
    ZipExportError,
    MalformedInputError,
    MissingFieldError,
    DuplicateKeyError,
    DuplicateNameError,
)
from .headers import REQUIRED_COLUMN_HEADINGS

__all__ = [
    "ZipExportError",
    "MalformedInputError",
    "MissingFieldError",
    "DuplicateKeyError",
    "DuplicateNameError",
    "REQUIRED_COLUMN_HEADINGS",
]
