import json
import zipfile

import pytest

from conftest import write_csv
import zipbuild


def test_missing_arguments_print_usage_and_exit_cleanly(capsys):
    zipbuild.main([])
    out = capsys.readouterr().out
    assert "usage:" in out
    assert "_asset_data.original_filename, _asset_data.access_copy_location" in out

    zipbuild.main(["only.csv"])
    assert "usage:" in capsys.readouterr().out


def test_cli_builds_archive_into_directory(tmp_path, access_copies):
    csv_path = write_csv(tmp_path / "export.csv", [["photo1.tif", access_copies[0]]])
    out_dir = tmp_path / "delivery"
    out_dir.mkdir()
    zipbuild.main([str(csv_path), str(out_dir), "--settings", str(tmp_path / "s.json"), "--quiet"])
    with zipfile.ZipFile(out_dir / "export.zip") as zf:
        assert zf.namelist() == ["photo1.jpg"]


def test_cli_error_exits_non_zero(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        zipbuild.main([str(tmp_path / "nope.csv"), str(tmp_path / "out.zip"), "--settings", str(tmp_path / "s.json")])
    assert exc.value.code == 1
    assert "Error: File not found" in capsys.readouterr().err


def test_cli_decline_prompt_keeps_existing_zip(tmp_path, access_copies, monkeypatch):
    csv_path = write_csv(tmp_path / "export.csv", [["photo1.tif", access_copies[0]]])
    zip_path = tmp_path / "out.zip"
    zip_path.write_bytes(b"old")
    monkeypatch.setattr("builtins.input", lambda _prompt: "yes")
    zipbuild.main([str(csv_path), str(zip_path), "--settings", str(tmp_path / "s.json")])
    assert zip_path.read_bytes() == b"old"


def test_cli_yes_flag_and_saved_settings(tmp_path, access_copies):
    csv_path = write_csv(tmp_path / "export.csv", [["photo1.tif", access_copies[0]]])
    zip_path = tmp_path / "out.zip"
    zip_path.write_bytes(b"old")
    settings_path = tmp_path / "Settings" / "zip_settings.json"
    zipbuild.main([
        str(csv_path), str(zip_path),
        "--settings", str(settings_path), "--save-settings",
        "--compression", "stored", "--yes", "--quiet",
    ])
    assert json.loads(settings_path.read_text(encoding="utf-8"))["compression"] == "stored"
    with zipfile.ZipFile(zip_path) as zf:
        assert zf.getinfo("photo1.jpg").compress_type == zipfile.ZIP_STORED


def test_cli_non_utf8_csv_exits_with_message(tmp_path, capsys):
    csv_path = tmp_path / "export.csv"
    csv_path.write_bytes("_asset_data.original_filename,_asset_data.access_copy_location\ncafé.tif,/ac/1.jpg\n".encode("latin-1"))
    with pytest.raises(SystemExit) as exc:
        zipbuild.main([str(csv_path), str(tmp_path / "out.zip"), "--settings", str(tmp_path / "s.json")])
    assert exc.value.code == 1
    assert "Error: Could not read" in capsys.readouterr().err
