"""Command-line argument validation and simulation rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from philosim.charclass import atoi

USAGE = "./philo nphilos time_dead time_eat time_sleep [must_eat]"
MAX_PHILOSOPHERS = 200
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot start a simulation."""


@dataclass(frozen=True)
class Rules:
    """Parameters of one dining-philosophers simulation; times are in ms."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: Optional[int] = None


def check_arguments(args: Sequence[str]) -> None:
    """Check that there are four or five arguments made only of digits."""
    if not 4 <= len(args) <= 5:
        raise ArgumentError(USAGE)
    for arg in args:
        if not set(arg) <= _DIGITS:
            raise ArgumentError(f"Invalid argument: {arg}")


def parse_rules(args: Sequence[str]) -> Rules:
    """Validate the arguments and build the rules they describe."""
    check_arguments(args)
    count = atoi(args[0])
    if count <= 0 or count > MAX_PHILOSOPHERS:
        raise ArgumentError("Wrong number of philosophers.")
    return Rules(
        number_of_philosophers=count,
        time_to_die=atoi(args[1]),
        time_to_eat=atoi(args[2]),
        time_to_sleep=atoi(args[3]),
        must_eat=atoi(args[4]) if len(args) == 5 else None,
    )