from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional, Set
import csv

from .errors import DuplicateKeyError, DuplicateNameError, MissingFieldError
from .headers import ACCESS_COPY_LOCATION, CSV_ENCODING, ORIGINAL_FILENAME, unreadable

DUPLICATE_POLICIES = ("by_original_name", "by_derived_name")
EXTENSION_MODES = ("literal", "suffix")


@dataclass
class MappingState:
    """Access copy location -> output filename, plus what has been seen so far."""

    mapping: Dict[str, str] = field(default_factory=dict)
    seen_locations: Set[str] = field(default_factory=set)
    seen_names: Set[str] = field(default_factory=set)

    @property
    def count(self) -> int:
        return len(self.mapping)

    def copy(self) -> "MappingState":
        return MappingState(dict(self.mapping), set(self.seen_locations), set(self.seen_names))


def base_name(path: str) -> str:
    return path.rstrip("/").rsplit("/", 1)[-1]


def file_extension(name: str) -> str:
    base = base_name(name)
    i = base.rfind(".")
    return base[i:] if i >= 0 else ""


def derive_output_filename(original_filename: str, access_copy_location: str, extension_mode: str = "literal") -> str:
    """Base name of the original filename, carrying the access copy's extension.

    `literal` swaps every occurrence of the original extension text, so
    "scan.tif_v2.tif" becomes "scan.jpg_v2.jpg". `suffix` only swaps the
    trailing one. A name without an extension gets the new one appended.
    """
    if extension_mode not in EXTENSION_MODES:
        raise ValueError(f"Unknown extension mode: {extension_mode}")
    base = base_name(original_filename)
    old_ext = file_extension(base)
    new_ext = file_extension(access_copy_location)
    if not old_ext:
        return base + new_ext
    if extension_mode == "literal":
        return base.replace(old_ext, new_ext)
    return base[: -len(old_ext)] + new_ext


def process_records(
    rows: Iterable[Mapping[str, Optional[str]]],
    state: Optional[MappingState] = None,
    duplicate_policy: str = "by_original_name",
    extension_mode: str = "literal",
    first_line: int = 2,
    current_line: Optional[Callable[[], int]] = None,
) -> MappingState:
    """Validate rows in order and return the state with their mapping entries added.

    The given state is not modified; a failure anywhere means no mapping.
    Messages carry the CSV line of each row: `current_line()` when given,
    otherwise counting from `first_line` one line per row.
    """
    if duplicate_policy not in DUPLICATE_POLICIES:
        raise ValueError(f"Unknown duplicate policy: {duplicate_policy}")
    out = state.copy() if state is not None else MappingState()

    for index, row in enumerate(rows, first_line):
        line = current_line() if current_line is not None else index
        original_filename = row.get(ORIGINAL_FILENAME) or ""
        access_copy_location = row.get(ACCESS_COPY_LOCATION) or ""
        if not original_filename:
            raise MissingFieldError(
                f"No original filename available in spreadsheet for {access_copy_location} (line {line})"
            )
        if not access_copy_location:
            raise MissingFieldError(
                f"No access copy location available in spreadsheet for {original_filename} (line {line})"
            )

        new_name = derive_output_filename(original_filename, access_copy_location, extension_mode)
        if not new_name:
            raise MissingFieldError(f"Could not derive a filename from {original_filename!r} (line {line})")

        if access_copy_location in out.seen_locations:
            raise DuplicateKeyError(f"Encountered duplicate access copy location: {access_copy_location} (line {line})")

        name_key = original_filename if duplicate_policy == "by_original_name" else new_name
        if name_key in out.seen_names:
            label = "original file name" if duplicate_policy == "by_original_name" else "output file name"
            raise DuplicateNameError(f"Encountered duplicate {label}: {name_key} (line {line})")

        out.seen_locations.add(access_copy_location)
        out.seen_names.add(name_key)
        out.mapping[access_copy_location] = new_name
    return out


def read_mapping(
    csv_path: Path,
    duplicate_policy: str = "by_original_name",
    extension_mode: str = "literal",
) -> MappingState:
    try:
        with open(csv_path, "r", newline="", encoding=CSV_ENCODING) as f:
            reader = csv.DictReader(f)
            # line_num is the last physical line of the row just read; blank lines are skipped
            return process_records(
                reader,
                duplicate_policy=duplicate_policy,
                extension_mode=extension_mode,
                current_line=lambda: reader.line_num,
            )
    except (UnicodeDecodeError, csv.Error) as e:
        raise unreadable(csv_path, e) from e
