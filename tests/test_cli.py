import random

import pytest

from pushswap.checker import run_instructions
from pushswap.cli import main


def test_no_arguments_returns_one(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_numbers_out_of_order_print_sa(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize("args", [["1", "2", "3"], ["5"], ["-3", "0", "7", "12"]])
def test_sorted_input_returns_two_without_output(capsys, args):
    assert main(args) == 2
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["abc"],
        ["2147483648"],
        ["-2147483649"],
        ["3", "1x", "2"],
        ["3", "", "2"],
    ],
)
def test_invalid_input_prints_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_limits_are_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize("size", [3, 5, 10, 50])
def test_printed_instructions_sort_the_input(capsys, size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    while values == sorted(values):
        rng.shuffle(values)
    assert main([str(value) for value in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    final_a, final_b = run_instructions(values, lines)
    assert final_a == sorted(values)
    assert final_b == []