import io

import pytest

from philosim.cli import main, run_simulation
from philosim.parsing import ArgumentError


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["4", "800", "200"],
        ["4", "800", "200", "200", "5", "6"],
    ],
)
def test_wrong_number_of_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error: Wrong number of arguments\n"


def test_non_digit_argument_reported(capsys):
    assert main(["4", "8a0", "200", "200"]) == 1
    assert capsys.readouterr().out == "Error: Non-digit character.\n"


def test_zero_philosophers_reported(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert capsys.readouterr().out == "Error: Number of philosophers cannot be 0.\n"


def test_too_many_philosophers_reported(capsys):
    assert main(["201", "800", "200", "200"]) == 1
    assert (
        capsys.readouterr().out
        == "Error: Too many philosophers. Maximum is 200.\n"
    )


def test_run_simulation_rejects_bad_arguments():
    with pytest.raises(ArgumentError):
        run_simulation(["4", "-800", "200", "200"], io.StringIO())


def test_single_philosopher_takes_one_fork_and_dies():
    out = io.StringIO()
    assert run_simulation(["1", "100", "50", "50"], out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0].split(" ", 1)[1] == "1 has taken a fork"
    assert lines[-1].split(" ", 1)[1] == "1 died"
    assert int(lines[-1].split()[0]) >= 100


def test_main_single_philosopher_exit_status(capsys):
    assert main(["1", "60", "20", "20"]) == 0
    output = capsys.readouterr().out
    assert output.rstrip("\n").endswith(" 1 died")


def test_everyone_eats_enough_and_nobody_dies():
    out = io.StringIO()
    assert run_simulation(["4", "800", "20", "20", "2"], out) == 0
    lines = out.getvalue().splitlines()
    assert not any(line.endswith(" died") for line in lines)
    meals = {position: 0 for position in range(1, 5)}
    for line in lines:
        _, position, message = line.split(" ", 2)
        if message == "is eating":
            meals[int(position)] += 1
    assert all(count >= 2 for count in meals.values())


def test_log_lines_have_timestamp_position_message():
    out = io.StringIO()
    run_simulation(["3", "800", "20", "20", "1"], out)
    allowed = {
        "has taken a fork",
        "is eating",
        "is sleeping",
        "is thinking",
        "died",
    }
    lines = out.getvalue().splitlines()
    assert lines
    for line in lines:
        timestamp, position, message = line.split(" ", 2)
        assert int(timestamp) >= 0
        assert 1 <= int(position) <= 3
        assert message in allowed