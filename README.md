# philosim

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. Each philosopher shares one fork with each neighbour around
a round table. A philosopher eats, sleeps and thinks, over and over. A
separate monitor thread checks the table every millisecond. The simulation
stops when a philosopher starves. If you give a required number of meals,
it also stops once every philosopher has eaten that many.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

You can also run `python -m philosim.cli` with the same arguments.

All times are in milliseconds. For example:

```
philo 5 800 200 200
philo 4 410 200 200 7
```

Each state change prints one line on standard output. A line holds the
milliseconds since the start, the philosopher's number (counted from 1) and
what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. After a death is reported, no more lines are
printed. If the simulation stops because everyone has eaten enough, no
final line is printed.

If there is only one philosopher, that philosopher takes the one fork, waits
out `time_to_die` and dies.

### Argument rules

- You must give either four or five arguments.
- Every argument must be a whole number. It may have a leading `+` or `-`.
- A value must fit in a 32-bit signed integer and must not be negative.
- The number of philosophers must be between 1 and 200.
- If you give the number of meals, it cannot be 0.

When an argument is invalid, the command prints one message on standard
output and exits with status 1. Most messages have the form
`Error: <reason>.`. A wrong argument count prints
`Error: Wrong number of arguments`. A meal count of 0 prints
`Number of times each philosopher must eat cannot be 0`.

## Library use

You can do the same work from Python:

```python
import sys

from philosim.cli import run_simulation

run_simulation(["5", "800", "200", "200", "3"], sys.stdout)
```

`run_simulation(args, out)` writes the log to `out` and returns 0. It raises
`philosim.parsing.ArgumentError` when the arguments are invalid. The
error's `line` attribute holds the message that the command would print.

The pieces can also be used one at a time:

- `philosim.parsing.parse_arguments(args)` checks a list of arguments,
  without the program name, and returns a frozen `Settings` value.
  `Settings` has the fields `number_of_philosophers`, `time_to_die`,
  `time_to_eat`, `time_to_sleep` and `must_eat`. A `must_eat` of 0 means
  there is no meal limit.
- `philosim.parsing.atoi`, `exceeds_int_limit`, `check_digits` and
  `check_limits` are the helpers that `parse_arguments` uses.
- `philosim.simulation.Table(settings, out)` holds the philosophers and
  their forks. `Table.run()` starts the monitor and one thread per
  philosopher, then waits for all of them to finish.

## Running the tests

```
pip install .[test]
pytest
```