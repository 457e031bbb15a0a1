"""Reading the network description and running the delivery simulation."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence

from depotsim.depot import Depot
from depotsim.event import (
    DESTACK,
    PACKAGE,
    RESTOCK,
    TRANSPORT,
    DepotNotPrepared,
    Event,
    PackageDelivered,
    RestockPending,
)
from depotsim.graph import Graph
from depotsim.package import Package
from depotsim.scheduler import Scheduler

DEFAULT_MAX_TIME = 100_000


@dataclass(frozen=True)
class PackageRequest:
    """A package to be posted at a given time."""

    posting_time: int
    package_id: int
    origin: int
    destination: int


@dataclass
class SimulationInput:
    """Everything the input file describes."""

    transport_capacity: int
    transport_time: int
    freeze_time: int
    removal_cost: int
    adjacency: list[list[int]]
    packages: list[PackageRequest] = field(default_factory=list)

    @property
    def depot_count(self) -> int:
        return len(self.adjacency)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self, what: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError(f"input ended while reading {what}") from None

    def integer(self, what: str) -> int:
        token = self.word(what)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def parse_input(text: str) -> SimulationInput:
    """Parse the simulation input; raises ValueError on malformed text."""
    tokens = _Tokens(text)
    capacity = tokens.integer("the transport capacity")
    transport_time = tokens.integer("the transport time")
    freeze_time = tokens.integer("the freeze time")
    removal_cost = tokens.integer("the removal cost")
    depot_count = tokens.integer("the number of depots")
    if depot_count < 0:
        raise ValueError("the number of depots cannot be negative")
    adjacency = [
        [tokens.integer(f"connection {row} {column}") for column in range(depot_count)]
        for row in range(depot_count)
    ]
    package_count = tokens.integer("the number of packages")
    packages = []
    for _ in range(package_count):
        posting_time = tokens.integer("a posting time")
        tokens.word("a package label")
        package_id = tokens.integer("a package id")
        tokens.word("an origin label")
        origin = tokens.integer("an origin depot")
        tokens.word("a destination label")
        destination = tokens.integer("a destination depot")
        packages.append(PackageRequest(posting_time, package_id, origin, destination))
    return SimulationInput(
        capacity, transport_time, freeze_time, removal_cost, adjacency, packages
    )


def build_network(config: SimulationInput) -> Graph:
    """Create the depots and connect them as the adjacency matrix says."""
    count = config.depot_count
    graph = Graph(count)
    for index in range(count):
        graph.add_vertex(Depot(index, config.transport_capacity))
    for row, links in enumerate(config.adjacency):
        if len(links) != count:
            raise ValueError(f"row {row} of the adjacency matrix has {len(links)} entries")
        for column, value in enumerate(links):
            if value == 1:
                graph.add_edge_by_index(row, column)
        graph.set_edge_connections(row)
    return graph


def _depot_at(depots: list[Depot], index: int) -> Depot:
    if not 0 <= index < len(depots):
        raise ValueError(f"depot {index} does not exist")
    return depots[index]


def _run_transport(
    event: Event, now: int, scheduler: Scheduler, config: SimulationInput
) -> None:
    origin, destination = event.depot, event.destination
    try:
        truck = event.transport_out()
    except DepotNotPrepared as not_ready:
        count = not_ready.count
        for step in range(1, count + 1):
            scheduler.queue_event(Event.for_transport(DESTACK, now + step, origin, destination))
            scheduler.queue_event(Event.for_transport(RESTOCK, now + count, origin, destination))
        scheduler.queue_event(Event.for_transport(TRANSPORT, now + count, origin, destination))
        return
    arrival_time = now + config.transport_time
    for package in truck:
        arrival = Event.for_package(PACKAGE, arrival_time, package)
        arrival.depot = destination
        scheduler.queue_event(arrival)
    scheduler.queue_event(Event.for_transport(TRANSPORT, arrival_time, origin, destination))


def run_simulation(
    config: SimulationInput, max_time: int = DEFAULT_MAX_TIME
) -> list[Package]:
    """Run until every package is delivered, no event is left or ``max_time`` is reached.

    Returns the delivered packages in delivery order; each one's delivery time
    is its ``last_time_change``.
    """
    graph = build_network(config)
    depots = [adjacency.front() for adjacency in graph.adjacency_lists]
    scheduler = Scheduler()

    packages = []
    for request in config.packages:
        package = Package(
            request.package_id,
            _depot_at(depots, request.origin),
            _depot_at(depots, request.destination),
        )
        package.set_path(graph)
        packages.append(package)
        scheduler.queue_event(Event.for_package(PACKAGE, request.posting_time, package))

    for depot in depots:
        for destination in depot.connections():
            scheduler.queue_event(
                Event.for_transport(TRANSPORT, config.transport_time, depot, destination)
            )

    delivered: list[Package] = []
    while len(delivered) < len(packages):
        event = scheduler.dequeue_next_event()
        if event is None or event.event_time >= max_time:
            break
        scheduler.increase_time(event.event_time - scheduler.current_time)
        now = scheduler.current_time
        if event.event_type == TRANSPORT:
            _run_transport(event, now, scheduler, config)
        elif event.event_type == PACKAGE:
            try:
                event.transport_in(now)
            except PackageDelivered:
                delivered.append(event.delivered_package())
        else:
            try:
                event.transport_in(now)
            except RestockPending as pending:
                scheduler.requeue_event(event, pending.delay)
    return delivered


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation described by the input file given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: depotsim <input_file>", file=sys.stderr)
        return 1
    try:
        text = Path(args[0]).read_text()
    except OSError:
        print(f"error: could not open file {args[0]}", file=sys.stderr)
        return 1
    try:
        delivered = run_simulation(parse_input(text))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for package in delivered:
        print(
            f"{package.last_time_change:07d} pacote {package.package_id:03d} "
            f"entregue em {package.destination.depot_id:03d}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())