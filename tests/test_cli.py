import io

from taskci.cli import main


def test_main_reads_file_and_prints_comparison(tmp_path, capsys):
    path = tmp_path / "times.txt"
    path.write_text("122\n293\n203\n156\n89\n", encoding="utf-8")

    assert main(["--input", str(path), "--confidence", "90", "--compare"]) == 0
    out = capsys.readouterr().out
    assert "90% CI:" in out
    assert "Confidence level comparison:" in out
    assert "Geometric Mean (s) (M:SS)" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("42\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Need at least 2 data points" in out


def test_main_missing_file_returns_error(tmp_path):
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1


def test_main_reads_file_with_byte_order_mark(tmp_path, capsys):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbf122\n293\n")

    assert main(["--input", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Valid durations: 2 of 2 lines" in out
    assert "95% CI:" in out
