import json

import pytest

from compile_stylesheet import main as compile_cli
from compiler import compile_rules


def _run_compiler(tmp_path, *extra, rows=3, cols=8, name="out.css"):
    """
    Helper that invokes the CLI and returns pathlib.Path to the file.
    """
    outfile = tmp_path / "nested" / name   # nested dir exercises mkdir
    compile_cli(
        [
            "--rows", str(rows),
            "--cols", str(cols),
            "--outfile", str(outfile),
            "--log", str(tmp_path / "logs" / "compile.log"),
            *extra,
        ]
    )
    return outfile


def test_cli_writes_css(tmp_path, capsys):
    outfile = _run_compiler(tmp_path)
    css = outfile.read_text()
    assert css == compile_rules(3, 8).css
    assert "Wrote" in capsys.readouterr().out


def test_cli_creates_nested_directories(tmp_path):
    out_path = _run_compiler(tmp_path)
    assert out_path.exists()
    assert out_path.parent.is_dir()


def test_cli_deterministic(tmp_path):
    file1 = _run_compiler(tmp_path, name="a.css")
    file2 = _run_compiler(tmp_path, name="b.css")
    assert file1.read_text() == file2.read_text()


def test_cli_jsonl(tmp_path):
    outfile = _run_compiler(tmp_path, "--format", "jsonl", rows=2, cols=6, name="out.jsonl")
    lines = outfile.read_text().splitlines()
    assert len(lines) == compile_rules(2, 6).rule_count
    first = json.loads(lines[0])
    for field in ("target", "checked", "unchecked"):
        assert field in first


def test_cli_appends_log(tmp_path):
    _run_compiler(tmp_path)
    _run_compiler(tmp_path)
    records = (tmp_path / "logs" / "compile.log").read_text().splitlines()
    assert len(records) == 2
    entry = json.loads(records[0])
    assert entry["rows"] == 3 and entry["cols"] == 8
    assert entry["rule_count"] == compile_rules(3, 8).rule_count


def test_cli_no_log(tmp_path):
    _run_compiler(tmp_path, "--no-log")
    assert not (tmp_path / "logs").exists()


def test_cli_warns_when_rows_exceed_cap(tmp_path, capsys):
    outfile = _run_compiler(tmp_path, "--cap", "2", rows=5, cols=4)
    err = capsys.readouterr().err
    assert "[warning]" in err and "3-5" in err
    assert "3-5" in outfile.read_text()


def test_cli_reads_config(tmp_path):
    cfg = tmp_path / "grid.yaml"
    outfile = tmp_path / "from_config.css"
    cfg.write_text(f"grid:\n  rows: 2\n  cols: 5\n  outfile: {outfile}\n")
    compile_cli(["--config", str(cfg), "--no-log"])
    assert outfile.read_text() == compile_rules(2, 5).css


def test_cli_flags_override_config(tmp_path):
    cfg = tmp_path / "grid.yaml"
    cfg.write_text("rows: 2\ncols: 5\n")
    outfile = tmp_path / "override.css"
    compile_cli(["--config", str(cfg), "--cols", "7", "--outfile", str(outfile), "--no-log"])
    assert outfile.read_text() == compile_rules(2, 7).css


def test_cli_requires_outfile(tmp_path):
    with pytest.raises(SystemExit) as exc:
        compile_cli(["--rows", "2", "--cols", "4", "--no-log"])
    assert "outfile" in str(exc.value.code)


def test_cli_rejects_bad_dimensions(tmp_path):
    with pytest.raises(SystemExit) as exc:
        compile_cli(["--rows", "0", "--cols", "4", "--outfile", str(tmp_path / "x.css"), "--no-log"])
    assert "rows" in str(exc.value.code)
    assert not (tmp_path / "x.css").exists()


def test_cli_rejects_oversized_cap(tmp_path):
    with pytest.raises(SystemExit) as exc:
        compile_cli(["--rows", "12", "--cols", "4", "--cap", "12",
                     "--outfile", str(tmp_path / "x.css"), "--no-log"])
    assert "cap" in str(exc.value.code)
    assert not (tmp_path / "x.css").exists()
