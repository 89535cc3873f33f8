from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Mapping
import os
import zipfile

COMPRESSION_METHODS: Dict[str, int] = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
    "bzip2": zipfile.ZIP_BZIP2,
    "lzma": zipfile.ZIP_LZMA,
}


def missing_sources(mapping: Mapping[str, str]) -> List[str]:
    return [src for src in mapping if not (os.path.isfile(src) and os.access(src, os.R_OK))]


def build_archive(
    mapping: Mapping[str, str],
    zip_path: Path,
    compression: str = "deflated",
    verbose: bool = True,
) -> List[str]:
    """Write every access copy into a new zip under its mapped name, in mapping order.

    Returns the member names written. The zip must not exist yet. If a write
    fails the partial zip is removed and the error propagates.
    """
    if compression not in COMPRESSION_METHODS:
        raise ValueError(f"Unknown compression: {compression}")
    zip_path = Path(zip_path)
    if zip_path.exists():
        raise FileExistsError(f"Archive already exists: {zip_path}")

    members: List[str] = []
    # Sources older than 1980 are stored with the earliest zip timestamp.
    zf = zipfile.ZipFile(zip_path, "x", compression=COMPRESSION_METHODS[compression], strict_timestamps=False)
    try:
        with zf:
            for file_path, name_in_archive in mapping.items():
                if not os.path.isfile(file_path):
                    raise FileNotFoundError(f"File not found: {file_path}")
                if verbose:
                    print(f"Adding: {file_path} as {name_in_archive}")
                zf.write(file_path, arcname=name_in_archive)
                members.append(name_in_archive)
    except BaseException:
        zip_path.unlink(missing_ok=True)
        raise
    return members
