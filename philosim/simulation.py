"""The dining-philosophers simulation: philosopher threads and a monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from philosim.parsing import Rules

_MONITOR_INTERVAL = 0.0005


def now_ms() -> int:
    """Return the wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def _pause(ms: int) -> None:
    # Each activity waits for half of its configured duration.
    time.sleep(ms / 2000)


@dataclass(eq=False)
class Philosopher:
    """One diner with the two forks it shares with its neighbours."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    eat_count: int = 0
    last_meal: int = 0
    thread: Optional[threading.Thread] = field(default=None, repr=False)


class Simulation:
    """Runs philosophers around a table until one dies or all have eaten."""

    def __init__(self, rules: Rules, out: Optional[TextIO] = None) -> None:
        self.rules = rules
        self.out = out if out is not None else sys.stdout
        self._stopped = False
        self._death_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        count = rules.number_of_philosophers
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self.start_time = now_ms()
        self.philosophers: List[Philosopher] = [
            Philosopher(
                id=i + 1,
                left_fork=self.forks[i],
                right_fork=self.forks[(i + 1) % count],
                last_meal=now_ms(),
            )
            for i in range(count)
        ]

    def is_stopped(self) -> bool:
        """True once the simulation has ended."""
        with self._death_lock:
            return self._stopped

    def stop(self) -> None:
        """End the simulation; nothing more is printed afterwards."""
        with self._death_lock:
            self._stopped = True

    def print_state(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped state line unless the simulation has ended."""
        with self._print_lock:
            if not self.is_stopped():
                timestamp = now_ms() - self.start_time
                self.out.write(f"{timestamp} {philosopher.id} {message}\n")
                self.out.flush()

    def all_have_eaten(self) -> bool:
        """True when a meal target is set and every philosopher has reached it."""
        if self.rules.must_eat is None:
            return False
        with self._meal_lock:
            return all(p.eat_count >= self.rules.must_eat for p in self.philosophers)

    def monitor(self) -> None:
        """Watch for a death or for every meal target being met, then stop."""
        while not self.is_stopped():
            for philosopher in self.philosophers:
                current = now_ms()
                with self._meal_lock:
                    last_meal = philosopher.last_meal
                if self.all_have_eaten():
                    self.print_state(philosopher, "end")
                    self.stop()
                    return
                if current - last_meal > self.rules.time_to_die:
                    self.print_state(philosopher, "died")
                    self.stop()
                    return
            time.sleep(_MONITOR_INTERVAL)

    def _take_forks(self, philosopher: Philosopher) -> None:
        if philosopher.id % 2 == 0:
            first, second = philosopher.right_fork, philosopher.left_fork
        else:
            first, second = philosopher.left_fork, philosopher.right_fork
        first.acquire()
        self.print_state(philosopher, "has taken a fork")
        second.acquire()
        self.print_state(philosopher, "has taken a fork")

    @staticmethod
    def _put_forks(philosopher: Philosopher) -> None:
        if philosopher.id % 2 == 0:
            philosopher.left_fork.release()
            philosopher.right_fork.release()
        else:
            philosopher.right_fork.release()
            philosopher.left_fork.release()

    def run_philosopher(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think until the simulation ends or the meals are done."""
        rules = self.rules
        if rules.number_of_philosophers == 1:
            with philosopher.left_fork:
                self.print_state(philosopher, "has taken a fork")
                _pause(rules.time_to_die)
            return
        while not self.is_stopped() and not self.all_have_eaten():
            self._take_forks(philosopher)
            try:
                self.print_state(philosopher, "is eating")
                with self._meal_lock:
                    philosopher.eat_count += 1
                    philosopher.last_meal = now_ms()
                _pause(rules.time_to_eat)
            finally:
                self._put_forks(philosopher)
            self.print_state(philosopher, "is sleeping")
            _pause(rules.time_to_sleep)
            self.print_state(philosopher, "is thinking")

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all."""
        for philosopher in self.philosophers:
            philosopher.thread = threading.Thread(
                target=self.run_philosopher, args=(philosopher,), daemon=True
            )
            philosopher.thread.start()
        watcher = threading.Thread(target=self.monitor, daemon=True)
        watcher.start()
        for philosopher in self.philosophers:
            philosopher.thread.join()
        watcher.join()