from __future__ import annotations


class ZipExportError(Exception):
    """Base class for problems found in the export CSV."""


class MalformedInputError(ZipExportError):
    pass


class MissingFieldError(ZipExportError):
    pass


class DuplicateKeyError(ZipExportError):
    pass


class DuplicateNameError(ZipExportError):
    pass
