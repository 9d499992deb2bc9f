import pytest

from pushswap.cli import main
from pushswap.stacks import Machine


def _replay(values, text):
    machine = Machine(values)
    for line in text.splitlines():
        machine.apply(line)
    return machine


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_values(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


def test_extremes_accepted(capsys):
    assert main(["-2147483648", "2147483647"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["abc"],
        ["2147483648"],
        ["-2147483649"],
        ["1  2"],
        ["-"],
        [""],
        ["1", "2 2"],
        ["1+"],
    ],
)
def test_bad_input_reports_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize(
    "args, values",
    [
        (["3 2 1"], [3, 2, 1]),
        (["5", "+4", "-3 9", "0", "7"], [5, 4, -3, 9, 0, 7]),
        (["12 -8 33 4 19 0 -1 6 2 25"], [12, -8, 33, 4, 19, 0, -1, 6, 2, 25]),
    ],
)
def test_output_sorts_the_stack(capsys, args, values):
    assert main(args) == 0
    machine = _replay(values, capsys.readouterr().out)
    assert list(machine.a) == sorted(values)
    assert len(machine.b) == 0