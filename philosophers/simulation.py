"""Threaded dining philosophers simulation with a monitoring thread."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.parsing import Settings

_MONITOR_POLL = 0.0001
_PHILOSOPHER_POLL = 0.0001
_LONELY_POLL = 0.01


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def assign_forks(count: int) -> list[tuple[int, int]]:
    """Return, for each philosopher, the indices of its own fork and its neighbour's.

    Philosopher i owns fork i and borrows fork i + 1, the last one wrapping
    around to fork 0.
    """
    return [(index, (index + 1) % count) for index in range(count)]


class Philosopher:
    """One diner that eats, sleeps and thinks until the simulation stops."""

    def __init__(
        self,
        philo_id: int,
        simulation: Simulation,
        his_fork: threading.Lock,
        take_fork: threading.Lock,
    ) -> None:
        self.id = philo_id
        self.simulation = simulation
        self.his_fork = his_fork
        self.take_fork = take_fork
        self.meal_lock = threading.Lock()
        self.meals_eaten = 0
        self.last_meal_time = 0
        self.last_sleep_time = 0

    def run(self) -> None:
        """Cycle through eating, sleeping and thinking until told to stop."""
        sim = self.simulation
        with self.meal_lock:
            self.last_meal_time = now_ms()
        while not sim.should_stop():
            if not sim.should_stop():
                self.eat()
            if not sim.should_stop():
                self.sleep()
            if not sim.should_stop():
                self.think()

    def eat(self) -> None:
        """Take both forks, eat for time_to_eat, then put the forks down."""
        sim = self.simulation
        if self.id % 2 == 0:
            first, second = self.his_fork, self.take_fork
        else:
            first, second = self.take_fork, self.his_fork

        if sim.should_stop():
            return
        with first:
            if not sim.should_stop():
                sim.log(self, "has taken a fork.")
            if sim.settings.philosopher_count == 1:
                while not sim.should_stop():
                    time.sleep(_LONELY_POLL)
                return
            if sim.should_stop():
                return
            with second:
                if sim.should_stop():
                    return
                sim.log(self, "has taken a fork")
                if sim.should_stop():
                    return
                with self.meal_lock:
                    self.last_meal_time = now_ms()
                    self.meals_eaten += 1
                    started = self.last_meal_time
                sim.log(self, "is eating")
                self._wait(started, sim.settings.time_to_eat)

    def sleep(self) -> None:
        """Sleep for time_to_sleep, waking early if the simulation stops."""
        self.simulation.log(self, "is sleeping")
        self.last_sleep_time = now_ms()
        self._wait(self.last_sleep_time, self.simulation.settings.time_to_sleep)

    def think(self) -> None:
        """Announce thinking; thinking takes no fixed time."""
        self.simulation.log(self, "is thinking")

    def _wait(self, start: int, duration: int) -> None:
        while now_ms() - start < duration:
            if self.simulation.should_stop():
                break
            time.sleep(_PHILOSOPHER_POLL)


class Simulation:
    """Shared state, forks and threads of one dining philosophers run."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out
        self.died = False
        self.all_eaten = False
        self._dead_lock = threading.Lock()
        self._eaten_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.philosopher_count)]
        self.philosophers = [
            Philosopher(index + 1, self, self.forks[own], self.forks[borrowed])
            for index, (own, borrowed) in enumerate(
                assign_forks(settings.philosopher_count)
            )
        ]
        self.start_time = now_ms()

    def run(self) -> None:
        """Start the monitor and every philosopher, and wait for all of them."""
        self.start_time = now_ms()
        monitor = threading.Thread(target=self.monitor, name="monitor")
        threads = [
            threading.Thread(target=philosopher.run, name=f"philosopher-{philosopher.id}")
            for philosopher in self.philosophers
        ]
        monitor.start()
        for thread in threads:
            thread.start()
        monitor.join()
        for thread in threads:
            thread.join()

    def should_stop(self) -> bool:
        """Return True once everyone has eaten enough or someone has died."""
        with self._eaten_lock:
            stop = self.all_eaten
        with self._dead_lock:
            stop = stop or self.died
        return stop

    def check_death(self) -> bool:
        """Mark and announce the first philosopher who has starved, if any."""
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                last = philosopher.last_meal_time
                since_meal = 0 if last == 0 else now_ms() - last
            if since_meal > self.settings.time_to_die:
                with self._dead_lock:
                    self.died = True
                    self.log(philosopher, "died")
                return True
        return False

    def check_all_eaten(self) -> bool:
        """Mark the run finished if every philosopher has eaten enough meals."""
        required = self.settings.meals_required
        if required is None:
            return False
        satisfied = 0
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if philosopher.meals_eaten >= required:
                    satisfied += 1
        if satisfied >= len(self.philosophers):
            with self._eaten_lock:
                self.all_eaten = True
            return True
        return False

    def monitor(self) -> None:
        """Watch the philosophers until one dies or all have eaten enough."""
        while True:
            time.sleep(_MONITOR_POLL)
            if self.check_death():
                break
            if self.settings.meals_required is not None and self.check_all_eaten():
                break

    def log(self, philosopher: Philosopher, message: str) -> None:
        """Write one timestamped status line for a philosopher."""
        out = self.out if self.out is not None else sys.stdout
        with self._write_lock:
            elapsed = now_ms() - self.start_time
            out.write(f"{elapsed} {philosopher.id} {message}\n")
            out.flush()