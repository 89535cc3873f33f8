from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping
import csv
import json

try:
    import orjson  # type: ignore
    HAVE_ORJSON = True
except Exception:
    HAVE_ORJSON = False

MAP_FORMATS = ("csv", "ndjson")
MAP_HEADERS = ["AccessCopyLocation", "OutputFilename"]


def dumps_obj(obj: Any) -> str:
    if HAVE_ORJSON:
        return orjson.dumps(obj).decode("utf-8")
    return json.dumps(obj, ensure_ascii=False)


def write_rename_map(mapping: Mapping[str, str], out_path: Path, fmt: str = "csv") -> int:
    """Write location -> output name pairs in mapping order. Returns rows written."""
    fmt = fmt.lower()
    if fmt not in MAP_FORMATS:
        raise ValueError(f"Unknown map format: {fmt}")
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    if fmt == "csv":
        with open(out_path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(MAP_HEADERS)
            for src, name in mapping.items():
                w.writerow([src, name])
                count += 1
        return count
    with open(out_path, "w", encoding="utf-8") as f:
        for src, name in mapping.items():
            f.write(dumps_obj({MAP_HEADERS[0]: src, MAP_HEADERS[1]: name}))
            f.write("\n")
            count += 1
    return count
