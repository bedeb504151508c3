import json

import pytest

from matchbench.main import main


@pytest.fixture
def case_root(tmp_path):
    for sub, name, text, pattern, expected in [
        ("shared", "overlap", "abababab", "abab", "0,2,4"),
        ("shared", "no match", "hello world", "xyz", ""),
        ("hidden", "mississippi", "mississippi", "issi", "1,4"),
    ]:
        directory = tmp_path / "testcases" / sub
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name.replace(' ', '_')}.json"
        path.write_text(json.dumps({"name": name, "text": text, "pattern": pattern, "expected": expected}))
    return str(tmp_path)


def test_list(case_root, capsys):
    assert main(["list", "--root", case_root]) == 0
    out = capsys.readouterr().out
    assert "SHARED TESTS:" in out
    assert "[ 2] mississippi" in out


def test_run_everything(case_root, capsys):
    assert main(["--root", case_root]) == 0
    out = capsys.readouterr().out
    assert "Running ALL tests" in out
    assert "Running 3 test(s) with 5 algorithm(s)" in out
    assert "Testing complete!" in out


def test_hidden_with_chart(case_root, tmp_path, capsys):
    chart = tmp_path / "chart.png"
    assert main(["hidden", "--root", case_root, "--chart", str(chart)]) == 0
    assert chart.exists()
    assert "Running 1 test(s)" in capsys.readouterr().out


def test_indices_with_warnings(case_root, capsys):
    assert main(["0", "7", "x", "--root", case_root]) == 0
    out = capsys.readouterr().out
    assert "[Warning] Invalid test index 'x' (ignored)" in out
    assert "[Warning] Test index 7 is out of range (0-2)" in out
    assert "Running 1 test(s)" in out


def test_no_valid_indices(case_root, capsys):
    assert main(["x", "--root", case_root]) == 1
    assert "No valid test indices provided" in capsys.readouterr().out


def test_preanalysis_with_declining_selector(case_root, capsys):
    assert main(["pre", "--root", case_root, "--selector", "none"]) == 0
    assert "declined every test case" in capsys.readouterr().out


def test_document_mode(tmp_path, capsys):
    path = tmp_path / "story.txt"
    path.write_text("One fish two fish red fish blue fish", encoding="utf-8")
    assert main(["--document", str(path), "--pattern", "fish", "--pattern", "red"]) == 0
    out = capsys.readouterr().out
    assert "Running 2 test(s)" in out


def test_document_needs_pattern(tmp_path):
    path = tmp_path / "story.txt"
    path.write_text("text", encoding="utf-8")
    assert main(["--document", str(path)]) == 2


def test_unreadable_document(tmp_path):
    assert main(["--document", str(tmp_path / "missing.txt"), "--pattern", "a"]) == 1
