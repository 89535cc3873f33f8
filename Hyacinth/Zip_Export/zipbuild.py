"""
Hyacinth Zip Export

Takes a Hyacinth export CSV (single header row) and packages every access
copy it references into one zip, renamed after the asset's original filename
with the access copy's extension.

Structure
- zipkit/headers: required column check
- zipkit/records: filename derivation + duplicate checks -> mapping
- zipkit/archive: zip writer
- zipkit/map_export: optional rename map (CSV/NDJSON) for audit
- zipkit/settings: persistent settings used by every run
- zipkit/ui: prompts and path helpers
- zipkit/pipeline: a full run wired together
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from textwrap import dedent
from typing import List, Optional

from zipkit import ui
from zipkit.archive import COMPRESSION_METHODS
from zipkit.errors import ZipExportError
from zipkit.headers import HEADER_CHECK_MODES, REQUIRED_COLUMN_HEADINGS
from zipkit.map_export import MAP_FORMATS
from zipkit.pipeline import run_export
from zipkit.records import DUPLICATE_POLICIES, EXTENSION_MODES
from zipkit.settings import SETTINGS_DEFAULT_PATH, load_settings, merge_settings, save_settings

USAGE_TEXT = dedent(f"""
    usage:
      zipbuild.py ./path_to_hyacinth_export_csv_file.csv ./path_to_output_zip_file.zip
      The provided CSV must contain the following headers: {', '.join(REQUIRED_COLUMN_HEADINGS)}
""")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Zip the access copies listed in a Hyacinth export CSV, renamed by original filename."
    )
    ap.add_argument("csv", nargs="?", help="Hyacinth export CSV (single header row)")
    ap.add_argument("zip", nargs="?", help="Output zip path (a directory gets <csv name>.zip)")
    ap.add_argument("--settings", default=SETTINGS_DEFAULT_PATH, help="Settings JSON to load")
    ap.add_argument("--save-settings", action="store_true", help="Save the effective settings back to --settings")
    ap.add_argument("--duplicate-policy", choices=DUPLICATE_POLICIES, default=None,
                    help="Reject repeated original filenames, or repeated output filenames")
    ap.add_argument("--header-check", choices=HEADER_CHECK_MODES, default=None,
                    help="Look for the required headings in the first row only, or in any row")
    ap.add_argument("--extension-mode", choices=EXTENSION_MODES, default=None,
                    help="Replace every occurrence of the original extension, or only the trailing one")
    ap.add_argument("--compression", choices=list(COMPRESSION_METHODS), default=None, help="Zip compression")
    ap.add_argument("--map-out", default=None, help="Also write the rename map to this path")
    ap.add_argument("--map-format", choices=MAP_FORMATS, default=None, help="Rename map format")
    ap.add_argument("--dry-run", action="store_true", help="Validate and report only; do not write the zip")
    ap.add_argument("--yes", action="store_true", help="Delete an existing output zip without asking")
    ap.add_argument("--quiet", action="store_true", help="Only print prompts and errors")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if not args.csv or not args.zip:
        print(USAGE_TEXT)
        return

    settings_path = Path(ui.strip_quotes(args.settings))
    try:
        settings = merge_settings(load_settings(settings_path), {
            "duplicate_policy": args.duplicate_policy,
            "header_check": args.header_check,
            "extension_mode": args.extension_mode,
            "compression": args.compression,
            "map_format": args.map_format,
        })
    except ValueError as e:
        raise SystemExit(f"Error: {e}")
    if args.save_settings:
        save_settings(settings_path, settings)
        if not args.quiet:
            print(f"Settings saved: {settings_path}")

    csv_path = Path(ui.strip_quotes(args.csv))
    zip_path = ui.normalize_output_path(args.zip, csv_path.stem + ".zip")
    map_out = Path(ui.strip_quotes(args.map_out)) if args.map_out else None
    confirm = (lambda _q: True) if args.yes else ui.prompt_confirm

    try:
        run_export(
            csv_path,
            zip_path,
            confirm,
            settings=settings,
            map_out=map_out,
            dry_run=args.dry_run,
            verbose=not args.quiet,
        )
    except (ZipExportError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
