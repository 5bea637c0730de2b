import json

from steam_shortcuts.cli import main

from kvbytes import STR, cstr, entry, shortcuts_file


def _write(tmp_path, data: bytes):
    path = tmp_path / "shortcuts.vdf"
    path.write_bytes(data)
    return str(path)


def test_info_prints_json(tmp_path, capsys):
    path = _write(tmp_path, shortcuts_file({"0": entry(), "1": entry(AppName="Second", IsHidden=1)}))
    assert main(["info", path]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [s["app_name"] for s in out] == ["Calc", "Second"]
    assert out[1]["is_hidden"] is True
    assert out[1]["id"] == 1


def test_info_sample(tmp_path, capsys):
    path = _write(tmp_path, shortcuts_file({str(i): entry() for i in range(4)}))
    assert main(["info", path, "--sample", "2"]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 2


def test_info_summary(tmp_path, capsys):
    path = _write(tmp_path, shortcuts_file({"0": entry(), "1": entry(), "3": entry()}))
    assert main(["info", path, "--summary"]) == 0
    assert capsys.readouterr().out.strip() == "shortcuts=2"


def test_to_json(tmp_path):
    path = _write(tmp_path, shortcuts_file({"0": entry()}))
    out_path = tmp_path / "out.json"
    assert main(["to-json", path, str(out_path)]) == 0
    doc = json.loads(out_path.read_text(encoding="utf-8"))
    assert doc["source"] == path
    assert doc["shortcuts"][0]["exe"] == "calc.exe"


def test_decode_error_exit_status(tmp_path, capsys):
    path = _write(tmp_path, STR + cstr("k") + b"\xff\x00")
    assert main(["info", path]) == 1
    assert "error:" in capsys.readouterr().err


def test_invalid_structure_exit_status(tmp_path, capsys):
    path = _write(tmp_path, b"\x08")
    assert main(["info", path]) == 1
    assert "shortcuts" in capsys.readouterr().err


def test_missing_file_exit_status(tmp_path, capsys):
    assert main(["info", str(tmp_path / "nope.vdf")]) == 1
    assert "error:" in capsys.readouterr().err
