import pytest

from philosophers.cli import EXIT_FAILURE, main


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["5"],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "9"],
    ],
)
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == EXIT_FAILURE
    assert _lines(capsys) == ["Error: Invalid number of arguments"]


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "800", "200", "200"],
        ["201", "800", "200", "200"],
        ["5", "abc", "200", "200"],
        ["5", "800", "-200", "200"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "3000000000"],
    ],
)
def test_invalid_arguments(argv, capsys):
    assert main(argv) == EXIT_FAILURE
    assert _lines(capsys) == ["Error: invalid Arguments"]


def test_lonely_philosopher_dies(capsys):
    assert main(["1", "150", "100", "100"]) == 0
    lines = _lines(capsys)
    assert lines[0].split(" ", 1)[1] == "1 has taken a fork."
    assert lines[-1].endswith(" 1 died")
    assert sum(line.endswith("died") for line in lines) == 1


def test_run_until_everyone_has_eaten(capsys):
    assert main(["3", "1000", "50", "50", "2"]) == 0
    lines = _lines(capsys)
    assert not any(line.endswith("died") for line in lines)
    for philo_id in ("1", "2", "3"):
        eats = [line for line in lines if line.split(" ", 2)[1:] == [philo_id, "is eating"]]
        assert len(eats) >= 2


def test_timestamps_are_non_decreasing(capsys):
    assert main(["2", "1000", "30", "30", "2"]) == 0
    stamps = [int(line.split(" ", 1)[0]) for line in _lines(capsys)]
    assert stamps
    assert stamps == sorted(stamps)
    assert stamps[0] >= 0


def test_reads_sys_argv_when_none(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["philosophers", "2"])
    assert main() == EXIT_FAILURE
    assert _lines(capsys) == ["Error: Invalid number of arguments"]