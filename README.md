# philosophers

A simulation of the dining philosophers problem, run with threads.

Philosophers sit around a table with one fork between each pair of
neighbours. Each of them takes two forks, eats, sleeps and thinks, over and
over. A monitor thread watches every philosopher. The simulation stops when
one of them goes longer than the allowed time without eating, or, when a
meal count is given, once every philosopher has eaten at least that many
times.

## Installation

```
pip install .
```

## Usage

```
philosophers NUMBER TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

- `NUMBER`: number of philosophers, from 1 to 200.
- `TIME_TO_DIE`: milliseconds a philosopher can go without starting a meal.
- `TIME_TO_EAT`: milliseconds a meal lasts.
- `TIME_TO_SLEEP`: milliseconds a philosopher sleeps.
- `MEALS` (optional): the simulation ends once every philosopher has eaten at
  least this many times. Without it, the simulation runs until a
  philosopher dies.

Every argument must be a positive integer no larger than 2147483647. If the
number of arguments is wrong, `Error: Invalid number of arguments` is
printed; if an argument is not valid, `Error: invalid Arguments` is printed.
In both cases the command exits with status 2.

Each state change is printed on its own line. The line holds the milliseconds
since the start, the philosopher's number and the event:

```
0 1 has taken a fork.
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
810 2 died
```

The first fork a philosopher picks up is reported as `has taken a fork.`,
the second as `has taken a fork`. Even-numbered philosophers take their own
fork first; odd-numbered ones take their neighbour's first. A lone
philosopher has only one fork, so it picks it up and waits until it dies.

Example:

```
philosophers 5 800 200 200 7
```

## Using it from Python

```python
import sys

from philosophers.parsing import parse_args
from philosophers.simulation import Simulation

settings = parse_args(["4", "410", "200", "200", "3"])
Simulation(settings, sys.stdout).run()
```

- `philosophers.parsing.parse_args(args)` takes the arguments after the
  program name and returns a frozen `Settings` dataclass
  (`philosopher_count`, `time_to_die`, `time_to_eat`, `time_to_sleep`,
  `meals_required`, the last being `None` when not given). It raises
  `philosophers.parsing.ArgumentError`, a `ValueError`, when the arguments
  are not valid.
- `philosophers.simulation.Simulation(settings, out=None)` writes its status
  lines to `out`, or to standard output when `out` is `None`. `run()` starts
  the monitor and philosopher threads and returns once all of them have
  finished. After a run, `died` and `all_eaten` tell why it stopped.
- `philosophers.cli.main(argv=None)` is the command's entry point and returns
  the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```