# philosim

This package simulates the dining philosophers problem. Each philosopher
runs in its own thread and shares one fork with the neighbour on each side.
A philosopher takes two forks, eats, sleeps and thinks, and then does it
all again. A monitor thread watches the table. It stops the run when a
philosopher goes longer than `time_to_die` milliseconds without starting a
meal, or when every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philosim number_of_philosophers time_to_die time_to_eat time_to_sleep [must_eat]
```

- `number_of_philosophers`: from 1 to 200.
- `time_to_die`, `time_to_eat`, `time_to_sleep`: times in milliseconds.
  A philosopher eats for half of `time_to_eat` and sleeps for half of
  `time_to_sleep`.
- `must_eat` (optional): once every philosopher has eaten this many times,
  the run ends.

Every argument may hold only the digits 0 to 9. In these cases the program
prints a message and exits with status 1:

- The number of arguments is wrong. The message is a usage line.
- An argument holds something other than digits. The message is
  `Invalid argument: <arg>`.
- The number of philosophers is outside 1 to 200. The message is
  `Wrong number of philosophers.`

Each event is printed as one line with three parts: the milliseconds since
the start, the philosopher's number, and the event. The events are
`has taken a fork`, `is eating`, `is sleeping`, `is thinking`, `died` and
`end`. The monitor prints `end` when every meal target has been met. Once
the run has stopped, nothing more is printed.

```
$ philosim 5 800 200 200 3
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
...
```

With a single philosopher, that philosopher takes its only fork, waits, and
dies once `time_to_die` has passed.

## Library use

The simulation can also be run from Python:

```python
import sys

from philosim.parsing import parse_rules
from philosim.simulation import Simulation

rules = parse_rules(["4", "410", "200", "200", "2"])
Simulation(rules, sys.stdout).run()
```

`parse_rules` raises `philosim.parsing.ArgumentError` when the arguments
are invalid. `Rules` can also be built directly.

The package also includes these helper modules:

- `philosim.charclass`: ASCII classification (`is_digit`, `is_alpha`,
  `is_alnum`, `is_ascii`, `is_print`), case conversion (`to_upper`,
  `to_lower`), and C-style `atoi` and `itoa` for 32-bit integers.
- `philosim.memops`: operations on byte buffers. These are `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove` (which works within
  one buffer) and `memset`.
- `philosim.strops`: string helpers. These are `strlen`, `strchr`,
  `strrchr`, `strnstr`, `strncmp`, `strdup`, `substr`, `strjoin`, `strtrim`,
  `split`, `strmapi` and `striteri`. `strlcpy` and `strlcat` return the
  text they produce together with the length they tried to create.
- `philosim.linkedlist`: a singly linked `LinkedList` of `Node`s. It offers
  `push_front`, `push_back`, `last`, `for_each`, `clear` and `map`, and
  supports `len()` and iteration.

## Running the tests

```
pip install .[test]
pytest
```