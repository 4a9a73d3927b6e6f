"""Threads, forks and the monitor of the dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosim.parsing import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


def current_time_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class Philosopher:
    """One seat at the table: its own fork, its meal record and its routine."""

    def __init__(self, position: int, table: "Table") -> None:
        self.position = position
        self.table = table
        self.eaten_meals = 0
        self.last_meal = current_time_ms()
        self.currently_eating = False
        self.fork = threading.Lock()
        self.meal_lock = threading.Lock()
        self.next: Philosopher = self
        self.prev: Philosopher = self

    def __repr__(self) -> str:
        return f"Philosopher(position={self.position})"

    def _fork_order(self) -> tuple[threading.Lock, threading.Lock]:
        if self.position % 2 == 0:
            return self.next.fork, self.fork
        return self.fork, self.next.fork

    def grab_forks(self) -> None:
        """Take both forks; even seats start with the neighbour's fork."""
        for fork in self._fork_order():
            fork.acquire()
            self.table.announce(self, TAKEN_FORK)

    def put_back_forks(self) -> None:
        """Release both forks in the reverse order they were taken."""
        for fork in reversed(self._fork_order()):
            fork.release()

    def eat(self) -> None:
        """Take the forks, eat for the configured time and put them back."""
        table = self.table
        if table.is_someone_dead():
            return
        self.grab_forks()
        with self.meal_lock:
            self.currently_eating = True
            table.announce(self, EATING)
            self.last_meal = current_time_ms()
            self.eaten_meals += 1
        table.wait(table.settings.time_to_eat)
        with self.meal_lock:
            self.currently_eating = False
        self.put_back_forks()

    def sleep(self) -> None:
        """Sleep for the configured time unless the simulation is over."""
        table = self.table
        if not table.is_someone_dead():
            table.announce(self, SLEEPING)
            table.wait(table.settings.time_to_sleep)

    def think(self) -> None:
        """Think long enough to let neighbours get their turn at the forks."""
        settings = self.table.settings
        think_time = settings.time_to_eat - settings.time_to_sleep
        if settings.number_of_philosophers % 2 == 1:
            think_time += 1
        if not self.table.is_someone_dead():
            self.table.announce(self, THINKING)
        if think_time > 0:
            self.table.wait(think_time)

    def _alone(self) -> None:
        with self.next.fork:
            self.table.announce(self, TAKEN_FORK)
            self.table.wait(self.table.settings.time_to_die)

    def routine(self) -> None:
        """Eat, sleep and think until someone dies or everyone is full."""
        table = self.table
        if table.settings.number_of_philosophers == 1:
            self._alone()
            return
        if self.position % 2 == 0:
            table.wait(1)
        while not table.is_someone_dead() and not table.is_everyone_full():
            self.eat()
            self.sleep()
            self.think()

    def starved(self, now: int) -> bool:
        """Tell whether, at ``now``, the philosopher has gone too long without eating."""
        with self.meal_lock:
            return (
                now - self.last_meal >= self.table.settings.time_to_die
                and not self.currently_eating
            )


class Table:
    """The shared state of one simulation run."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = current_time_ms()
        self._death = threading.Event()
        self._print_lock = threading.Lock()
        self.philosophers = [
            Philosopher(seat, self)
            for seat in range(1, settings.number_of_philosophers + 1)
        ]
        count = len(self.philosophers)
        for index, philosopher in enumerate(self.philosophers):
            philosopher.next = self.philosophers[(index + 1) % count]
            philosopher.prev = self.philosophers[index - 1]

    def is_someone_dead(self) -> bool:
        """Tell whether the simulation has been stopped."""
        return self._death.is_set()

    def is_everyone_full(self) -> bool:
        """Tell whether every philosopher has eaten enough; stop the run if so."""
        must_eat = self.settings.must_eat
        if must_eat == 0:
            return False
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if philosopher.eaten_meals < must_eat:
                    return False
        self._death.set()
        return True

    def wait(self, milliseconds: int) -> None:
        """Sleep for ``milliseconds``, returning early once the simulation stops."""
        start = current_time_ms()
        while (elapsed := current_time_ms() - start) < milliseconds:
            if self._death.wait((milliseconds - elapsed) / 1000):
                break

    def _write(self, timestamp: int, position: int, message: str) -> None:
        self.out.write(f"{timestamp} {position} {message}\n")
        self.out.flush()

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped state change unless the simulation has stopped."""
        timestamp = current_time_ms() - self.start_time
        with self._print_lock:
            if not self.is_someone_dead():
                self._write(timestamp, philosopher.position, message)

    def check_deaths(self) -> bool:
        """Find a starved philosopher, stop the run and report the death."""
        now = current_time_ms()
        timestamp = now - self.start_time
        for philosopher in self.philosophers:
            if philosopher.starved(now):
                self._death.set()
                with self._print_lock:
                    self._write(timestamp, philosopher.position, DIED)
                return True
        return False

    def monitor(self) -> None:
        """Watch the table every millisecond until a death or everyone is full."""
        while not (self.check_deaths() or self.is_everyone_full()):
            self.wait(1)

    def run(self) -> None:
        """Start the monitor and one thread per philosopher, then wait for all."""
        monitor = threading.Thread(target=self.monitor, name="monitor")
        monitor.start()
        threads = [
            threading.Thread(
                target=philosopher.routine,
                name=f"philosopher-{philosopher.position}",
            )
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        monitor.join()
        for thread in threads:
            thread.join()