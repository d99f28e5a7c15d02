from philosim.cli import main
from philosim.parsing import USAGE


def test_missing_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.strip() == USAGE


def test_invalid_argument(capsys):
    assert main(["5", "a", "1", "1"]) == 1
    assert capsys.readouterr().out.strip() == "Invalid argument: a"


def test_wrong_number_of_philosophers(capsys):
    assert main(["0", "1", "1", "1"]) == 1
    assert capsys.readouterr().out.strip() == "Wrong number of philosophers."


def test_single_philosopher_run(capsys):
    assert main(["1", "100", "50", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" 1 died")
    assert lines[0].endswith(" 1 has taken a fork")


def test_meal_target_run(capsys):
    assert main(["2", "1000", "10", "10", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" end")
    assert not any(line.endswith(" died") for line in lines)