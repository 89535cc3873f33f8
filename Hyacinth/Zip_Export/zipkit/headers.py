from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Sequence
import csv

from .errors import MalformedInputError

ORIGINAL_FILENAME = "_asset_data.original_filename"
ACCESS_COPY_LOCATION = "_asset_data.access_copy_location"
REQUIRED_COLUMN_HEADINGS = (ORIGINAL_FILENAME, ACCESS_COPY_LOCATION)

HEADER_CHECK_MODES = ("first_row", "any_row")

# Hyacinth exports are UTF-8, sometimes written with a BOM by spreadsheet tools.
CSV_ENCODING = "utf-8-sig"


def header_is_valid(row: Iterable[str]) -> bool:
    return len(set(row) & set(REQUIRED_COLUMN_HEADINGS)) == len(REQUIRED_COLUMN_HEADINGS)


def missing_headings(row: Iterable[str]) -> List[str]:
    present = set(row)
    return [h for h in REQUIRED_COLUMN_HEADINGS if h not in present]


def _error(missing: Sequence[str]) -> MalformedInputError:
    return MalformedInputError(
        "This CSV is not compatible with this tool. "
        "It must contain all of the following column headings in the first row: "
        + ", ".join(REQUIRED_COLUMN_HEADINGS)
        + f" (missing: {', '.join(missing)})"
    )


def unreadable(csv_path: Path, err: Exception) -> MalformedInputError:
    return MalformedInputError(f"Could not read {csv_path} as a UTF-8 CSV file: {err}")


def validate_headers(csv_path: Path, mode: str = "first_row") -> List[str]:
    """Check the export for the required columns and return the header row.

    `first_row` only looks at the declared header row. `any_row` accepts the
    file if any row carries the required headings, the same scan older
    versions of this tool did. Records are still read with the first row as
    header, so this does not make double-header exports usable.
    """
    if mode not in HEADER_CHECK_MODES:
        raise ValueError(f"Unknown header check mode: {mode}")
    try:
        with open(csv_path, "r", newline="", encoding=CSV_ENCODING) as f:
            reader = csv.reader(f)
            first = next(reader, [])
            if header_is_valid(first):
                return first
            if mode == "any_row":
                for row in reader:
                    if header_is_valid(row):
                        return first
    except (UnicodeDecodeError, csv.Error) as e:
        raise unreadable(csv_path, e) from e
    raise _error(missing_headings(first))
