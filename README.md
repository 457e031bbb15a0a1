# depotsim

A discrete-event simulation of packages travelling through a network of
depots. Each package is routed along the shortest path (fewest hops) from
its origin depot to its destination. Inside a depot, packages wait in one
stack per connected depot. Transport events move the waiting packages
between connected depots, limited by each connection's flow capacity; when
more packages wait than a transport can carry, destack and restock events
are scheduled to shuffle packages through a depot's restock pile first.
Events are handed out in the order of a priority key built from the event
time, the ids involved and the event type.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Command line

```
depotsim INPUT_FILE
```

The input file is whitespace-separated text with these parts:

1. Transport capacity, transport time, transport freeze time, removal cost
   and the number of depots.
2. An adjacency matrix of 0/1 values, one row per depot; a 1 in row `i`,
   column `j` connects depot `i` to depot `j`.
3. The number of packages.
4. One entry per package: `<time> <label> <id> <label> <origin> <label> <destination>`,
   for example `5 pac 0 org 1 dst 3`. The label words are read and ignored.

For every delivered package, in delivery order, the command prints a line

```
<time, 7 digits> pacote <id, 3 digits> entregue em <depot, 3 digits>
```

It exits with status 1 and a message on standard error when it is not given
exactly one argument, when the file cannot be read, or when the input is
malformed (including references to depots that do not exist).

## Library use

```python
from pathlib import Path

from depotsim.simulation import build_network, parse_input, run_simulation

config = parse_input(Path("input.txt").read_text())
graph = build_network(config)          # the depot network on its own
delivered = run_simulation(config, max_time=100000)
for package in delivered:
    print(package.package_id, package.last_time_change)
```

`parse_input` returns a `SimulationInput` whose `packages` are
`PackageRequest` records. `run_simulation` stops when every package is
delivered, when no event is left, or when the next event is at or after
`max_time` (100000 by default). It returns the delivered `Package` objects;
each one's `last_time_change` is its delivery time.

The building blocks can be used on their own:

- `depotsim.structures`: `Stack` (grows as needed), `Queue` (fixed
  capacity, `OverflowError` when full, changeable with `resize`) and
  `LinkedList`.
- `depotsim.minheap`: `MinHeap`, with `in_order()` listing items smallest
  first without changing the heap.
- `depotsim.depot`: `Depot`, holding one stack per connected depot plus a
  restock stack (addressed with `None`) and a delivered stack (addressed with
  the depot itself).
- `depotsim.graph`: `Graph`, adjacency lists that start with their own
  depot, and a breadth-first `shortest_path`.
- `depotsim.package`: `Package`, with its route and timing fields.
- `depotsim.event`: `Event` (built with `Event.for_package` or
  `Event.for_transport`) and the exceptions `PackageDelivered`,
  `DepotNotPrepared` and `RestockPending`.
- `depotsim.scheduler`: `Scheduler`, the event queue and simulation clock.

## Limitations

- The transport freeze time and removal cost are read from the input and kept
  on `SimulationInput`, but the simulation does not use them.
- No statistics are collected beyond each package's last recorded transit
  time and delivery time; the command prints only the delivery lines.

## Running the tests

```
pytest
```