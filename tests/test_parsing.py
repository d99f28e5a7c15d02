import pytest

from philosim.parsing import USAGE, ArgumentError, Rules, check_arguments, parse_rules


@pytest.mark.parametrize("args", [[], ["1"], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count_reports_usage(args):
    with pytest.raises(ArgumentError) as info:
        check_arguments(args)
    assert str(info.value) == USAGE


@pytest.mark.parametrize("bad", ["a", "-5", "+5", "1.5", " 3"])
def test_non_digit_argument_is_rejected(bad):
    with pytest.raises(ArgumentError) as info:
        check_arguments(["4", bad, "200", "200"])
    assert str(info.value) == f"Invalid argument: {bad}"


def test_parse_four_arguments():
    rules = parse_rules(["5", "800", "200", "200"])
    assert rules == Rules(5, 800, 200, 200, None)


def test_parse_five_arguments_sets_must_eat():
    rules = parse_rules(["5", "800", "200", "200", "7"])
    assert rules.must_eat == 7


def test_leading_zeros_are_accepted():
    rules = parse_rules(["007", "0410", "0200", "0200"])
    assert rules.number_of_philosophers == 7
    assert rules.time_to_die == 410


@pytest.mark.parametrize("count", ["0", "201", ""])
def test_philosopher_count_out_of_range(count):
    with pytest.raises(ArgumentError, match="Wrong number of philosophers."):
        parse_rules([count, "800", "200", "200"])


def test_upper_limit_is_allowed():
    assert parse_rules(["200", "800", "200", "200"]).number_of_philosophers == 200


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_rules(["x", "1", "1", "1"])