import io

import pytest

from dstoolkit.bitflips import (
    TestCase,
    format_case,
    main,
    min_k_bit_flips,
    read_cases,
    run_case,
)

CASES_TEXT = "3\n3 1\n0 1 0\n3 2\n1 1 0\n8 3\n0 0 0 1 0 1 1 0\n"


def test_worked_examples():
    assert min_k_bit_flips([0, 1, 0], 1) == 2
    assert min_k_bit_flips([1, 1, 0], 2) == -1
    assert min_k_bit_flips([0, 0, 0, 1, 0, 1, 1, 0], 3) == 3


@pytest.mark.parametrize("bits", [[0, 1, 1, 0, 0], [1, 1, 1], [0, 0, 0, 0]])
def test_width_one_flips_each_zero(bits):
    assert min_k_bit_flips(bits, 1) == bits.count(0)


@pytest.mark.parametrize("n", [1, 2, 5])
def test_whole_array_flip(n):
    assert min_k_bit_flips([0] * n, n) == min_k_bit_flips([1] * n, n) + 1


def test_rejects_non_positive_width():
    with pytest.raises(ValueError):
        min_k_bit_flips([0, 1], 0)


def test_read_cases():
    cases = read_cases(CASES_TEXT)
    assert cases[:2] == [TestCase((0, 1, 0), 1), TestCase((1, 1, 0), 2)]
    assert len(cases) == 3


def test_read_cases_truncated():
    with pytest.raises(ValueError):
        read_cases("2\n3 1\n0 1 0\n3 2\n1")


def test_format_case():
    assert format_case(TestCase((0, 1, 0), 1)) == "Input array: [0, 1, 0], k = 1"


def test_run_case_reports_impossible():
    out = run_case(TestCase((1, 1, 0), 2))
    assert out.startswith(format_case(TestCase((1, 1, 0), 2)))
    assert out.endswith("Output: -1")


def _write(tmp_path):
    path = tmp_path / "cases.txt"
    path.write_text(CASES_TEXT)
    return path


def test_main_runs_all(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main([str(_write(tmp_path))]) == 0
    out = capsys.readouterr().out
    for number in (1, 2, 3):
        assert f"Test Case {number}:" in out
    assert "Output: -1" in out


def test_main_single_case(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    main([str(_write(tmp_path))])
    out = capsys.readouterr().out
    assert "Test Case 2:" in out
    assert "Test Case 1:" not in out


def test_main_choice_beyond_cases(tmp_path, monkeypatch, capsys):
    path = tmp_path / "one.txt"
    path.write_text("1\n2 1\n0 0\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    main([str(path)])
    assert "Invalid test case choice." in capsys.readouterr().out


def test_main_manual(monkeypatch, capsys):
    bits = [0, 1, 0, 0]
    monkeypatch.setattr("sys.stdin", io.StringIO(f"5\n{len(bits)}\n1\n0 1 0 0\n"))
    main([])
    assert f"Output: {bits.count(0)}" in capsys.readouterr().out


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))
    main([])
    assert "Invalid choice." in capsys.readouterr().out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "absent.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    main([str(missing)])
    assert "Failed to open file: " + str(missing) in capsys.readouterr().out