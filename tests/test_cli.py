import pytest

from pushswap.cli import format_stacks, main


def test_format_stacks_layout():
    assert format_stacks([1, 2], [3]) == (
        "\nA\tB\n  1\t   3\n  2\t   \n\n--------------------------------\n"
    )


def test_format_stacks_b_longer_than_a():
    text = format_stacks([], [4, 5])
    assert text.startswith("\nA\tB\n")
    assert "   \t   4\n" in text
    assert "   \t   5\n" in text


def test_format_stacks_empty():
    assert format_stacks([], []) == "\nA\tB\n\n--------------------------------\n"


def test_main_without_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_sorts_three(capsys):
    assert main(["3", "2", "1"]) == 0
    out = capsys.readouterr().out
    before = format_stacks([3, 2, 1], [])
    after = format_stacks([1, 2, 3], [])
    assert out == before + "SA\nRRA\n" + after


def test_main_normalizes_values(capsys):
    assert main(["30", "-5", "7"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(format_stacks([3, 1, 2], []))
    assert out.endswith(format_stacks([1, 2, 3], []))


def test_main_accepts_quoted_list(capsys):
    assert main(["5 3 1", "4", "2"]) == 0
    out = capsys.readouterr().out
    assert out.endswith(format_stacks([1, 2, 3, 4, 5], []))


@pytest.mark.parametrize("args", [["1", "1"], ["abc"], ["2147483648"], [""]])
def test_main_rejects_bad_input(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().out == "ulala"