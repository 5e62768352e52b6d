import io

import pytest

from judgesolutions.lcs import lcs_length, main, solve


def test_worked_example():
    assert lcs_length("ACAYKP", "CAPCAK") == len("ACAK")


def test_empty():
    assert lcs_length("", "ABC") == 0
    assert lcs_length("ABC", "") == 0


def test_identical():
    assert lcs_length("HELLO", "HELLO") == 5


def test_disjoint():
    assert lcs_length("ABC", "XYZ") == 0


@pytest.mark.parametrize(
    "a, b", [("ACAYKP", "CAPCAK"), ("AGGTAB", "GXTXAYB"), ("ABCDEF", "FBDAMN")]
)
def test_symmetric_and_bounded(a, b):
    result = lcs_length(a, b)
    assert result == lcs_length(b, a)
    assert result <= min(len(a), len(b))


def test_subsequence_found_whole():
    assert lcs_length("AXBYCZD", "ABCD") == 4


def test_works_on_lists():
    assert lcs_length([1, 2, 3, 4], [2, 4]) == 2


def test_solve():
    assert solve("ACAYKP\nCAPCAK\n") == "4"


def test_solve_missing_word():
    with pytest.raises(ValueError):
        solve("ACAYKP\n")


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ACAYKP CAPCAK"))
    assert main([]) == 0
    assert capsys.readouterr().out == "4"