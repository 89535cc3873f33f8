import csv
import json

import pytest

from zipkit.map_export import write_rename_map


MAPPING = {"/data/ac/001.jpg": "photo1.jpg", "/data/ac/002.jpg": "fotografía2.jpg"}


def test_write_rename_map_csv(tmp_path):
    out = tmp_path / "maps" / "rename_map.csv"
    assert write_rename_map(MAPPING, out, "csv") == 2
    with open(out, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows == [
        ["AccessCopyLocation", "OutputFilename"],
        ["/data/ac/001.jpg", "photo1.jpg"],
        ["/data/ac/002.jpg", "fotografía2.jpg"],
    ]


def test_write_rename_map_ndjson(tmp_path):
    out = tmp_path / "rename_map.ndjson"
    assert write_rename_map(MAPPING, out, "NDJSON") == 2
    with open(out, "r", encoding="utf-8") as handle:
        lines = [json.loads(line) for line in handle if line.strip()]
    assert lines[1] == {"AccessCopyLocation": "/data/ac/002.jpg", "OutputFilename": "fotografía2.jpg"}


def test_unknown_format_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        write_rename_map(MAPPING, tmp_path / "map.xml", "xml")
