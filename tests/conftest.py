import csv
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1] / "Hyacinth" / "Zip_Export"
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

ORIGINAL = "_asset_data.original_filename"
LOCATION = "_asset_data.access_copy_location"


def write_csv(path, rows, header=(ORIGINAL, LOCATION)):
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        if header is not None:
            writer.writerow(list(header))
        writer.writerows(rows)
    return path


@pytest.fixture
def access_copies(tmp_path):
    """Two small access copies on disk, returned as their path strings."""
    folder = tmp_path / "ac"
    folder.mkdir()
    paths = []
    for i, body in enumerate([b"first image", b"second image"], 1):
        p = folder / f"00{i}.jpg"
        p.write_bytes(body)
        paths.append(str(p))
    return paths
