"""One export run: CSV in, renamed access copies zipped out.

Nothing is written until the whole CSV has been validated. The only
filesystem changes are the optional rename map, the deletion of a confirmed
existing zip, and the new zip itself.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .archive import build_archive, missing_sources
from .headers import validate_headers
from .map_export import write_rename_map
from .records import read_mapping
from .settings import SettingsType, default_settings

Confirm = Callable[[str], bool]


@dataclass
class ExportResult:
    zip_path: Path
    mapping: Dict[str, str]
    members: List[str] = field(default_factory=list)
    map_path: Optional[Path] = None
    aborted: bool = False

    @property
    def count(self) -> int:
        return len(self.mapping)


def run_export(
    csv_path: Path,
    zip_path: Path,
    confirm: Confirm,
    settings: Optional[SettingsType] = None,
    map_out: Optional[Path] = None,
    dry_run: bool = False,
    verbose: bool = True,
) -> ExportResult:
    settings = dict(default_settings(), **(settings or {}))
    csv_path = Path(csv_path)
    zip_path = Path(zip_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"File not found: {csv_path}")

    if verbose:
        print(f"Reading {csv_path} ...")
    validate_headers(csv_path, settings["header_check"])
    state = read_mapping(
        csv_path,
        duplicate_policy=settings["duplicate_policy"],
        extension_mode=settings["extension_mode"],
    )
    result = ExportResult(zip_path=zip_path, mapping=state.mapping)
    if verbose:
        print(f"Found {state.count} records")

    if map_out is not None:
        rows = write_rename_map(state.mapping, Path(map_out), settings["map_format"])
        result.map_path = Path(map_out)
        if verbose:
            print(f"Rename map saved: {map_out} | rows: {rows}")

    if dry_run:
        if verbose:
            print("Dry run: no archive written.")
        return result

    missing = missing_sources(state.mapping)
    if missing:
        more = f" (and {len(missing) - 1} more)" if len(missing) > 1 else ""
        raise FileNotFoundError(f"File not found: {missing[0]}{more}")

    if zip_path.exists():
        if not confirm(f"An existing file was found at: {zip_path}.  Okay to delete it?"):
            print('A value other than "y" was entered.  Exiting.')
            result.aborted = True
            return result
        zip_path.unlink()
        if verbose:
            print(f"Deleted {zip_path}")

    if verbose:
        print(f"Writing assets to {zip_path} ...")
    result.members = build_archive(state.mapping, zip_path, settings["compression"], verbose=verbose)
    if verbose:
        print("Done!")
    return result
