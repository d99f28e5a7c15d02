import io
import re

from philosim.parsing import Rules
from philosim.simulation import Simulation, now_ms

LINE = re.compile(r"^(\d+) (\d+) (.+)$")


def _lines(out):
    return out.getvalue().splitlines()


def test_now_ms_is_monotonic_enough():
    first = now_ms()
    second = now_ms()
    assert second >= first
    assert first > 1_000_000_000_000


def test_philosophers_share_forks_in_a_ring():
    sim = Simulation(Rules(4, 800, 200, 200), out=io.StringIO())
    assert [p.id for p in sim.philosophers] == [1, 2, 3, 4]
    for current, following in zip(sim.philosophers, sim.philosophers[1:]):
        assert current.right_fork is following.left_fork
    assert sim.philosophers[-1].right_fork is sim.philosophers[0].left_fork


def test_print_state_format_and_stop_silences_output():
    out = io.StringIO()
    sim = Simulation(Rules(2, 800, 200, 200), out=out)
    sim.print_state(sim.philosophers[1], "is thinking")
    assert not sim.is_stopped()
    sim.stop()
    assert sim.is_stopped()
    sim.print_state(sim.philosophers[0], "is eating")
    lines = _lines(out)
    assert len(lines) == 1
    match = LINE.match(lines[0])
    assert match is not None
    assert match.group(2) == "2"
    assert match.group(3) == "is thinking"


def test_all_have_eaten_without_target_is_false():
    sim = Simulation(Rules(2, 800, 200, 200), out=io.StringIO())
    for p in sim.philosophers:
        p.eat_count = 50
    assert sim.all_have_eaten() is False


def test_all_have_eaten_with_target():
    sim = Simulation(Rules(3, 800, 200, 200, 2), out=io.StringIO())
    sim.philosophers[0].eat_count = 2
    sim.philosophers[1].eat_count = 3
    assert sim.all_have_eaten() is False
    sim.philosophers[2].eat_count = 2
    assert sim.all_have_eaten() is True


def test_single_philosopher_dies():
    out = io.StringIO()
    Simulation(Rules(1, 100, 50, 50), out=out).run()
    lines = _lines(out)
    assert lines[0].endswith(" 1 has taken a fork")
    timestamp, pid, message = LINE.match(lines[-1]).groups()
    assert (pid, message) == ("1", "died")
    assert int(timestamp) >= 100


def test_meal_target_ends_simulation():
    out = io.StringIO()
    sim = Simulation(Rules(2, 1000, 20, 20, 2), out=out)
    sim.run()
    lines = _lines(out)
    parsed = [LINE.match(line).groups() for line in lines]
    assert parsed[-1][1:] == ("1", "end")
    assert not any(message == "died" for _, _, message in parsed)
    for pid in ("1", "2"):
        meals = [m for _, p, m in parsed if p == pid and m == "is eating"]
        assert len(meals) >= 2
    assert all(p.eat_count >= 2 for p in sim.philosophers)
    stamps = [int(t) for t, _, _ in parsed]
    assert stamps == sorted(stamps)


def test_each_meal_follows_two_forks():
    out = io.StringIO()
    Simulation(Rules(3, 1000, 10, 10, 1), out=out).run()
    parsed = [LINE.match(line).groups() for line in _lines(out)]
    for pid in ("1", "2", "3"):
        own = [m for _, p, m in parsed if p == pid]
        for index, message in enumerate(own):
            if message == "is eating":
                assert own[index - 2:index] == ["has taken a fork"] * 2