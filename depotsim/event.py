"""Simulation events: package postings and arrivals, transports and pile shuffling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from depotsim.depot import Depot
    from depotsim.package import Package

DESTACK = 0
TRANSPORT = 1
PACKAGE = 2
RESTOCK = 3


class PackageDelivered(Exception):
    """Raised when a package reaches its final depot."""

    def __init__(self, message: str = "package delivered") -> None:
        super().__init__(message)


class DepotNotPrepared(Exception):
    """Raised when a stack holds more packages than a transport can carry."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"stack not ready for transport; {count} package(s) must be destacked first"
        )
        self.count = count


class RestockPending(Exception):
    """Raised when a restock event cannot run yet and must be delayed."""

    def __init__(self, delay: int) -> None:
        super().__init__(f"restock must be delayed by {delay}")
        self.delay = delay


@dataclass(eq=False)
class Event:
    """A scheduled event, ordered by its priority key."""

    event_type: int
    event_time: int
    priority_key: int
    depot: Optional["Depot"] = None
    destination: Optional["Depot"] = None
    package: Optional["Package"] = None

    @classmethod
    def for_package(cls, event_type: int, event_time: int, package: "Package") -> "Event":
        """Event about one package, happening at its current depot (or its origin before posting)."""
        depot = package.current if package.is_posted else package.origin
        key = int(f"{event_time:06d}{package.package_id:06d}{event_type}")
        return cls(event_type, event_time, key, depot, None, package)

    @classmethod
    def for_transport(
        cls, event_type: int, event_time: int, origin: "Depot", destination: "Depot"
    ) -> "Event":
        """Event about the connection from ``origin`` to ``destination``."""
        key = int(
            f"{event_time:06d}{origin.depot_id:03d}{destination.depot_id:03d}{event_type}"
        )
        return cls(event_type, event_time, key, origin, destination, None)

    def transport_out(self) -> list["Package"]:
        """Load every package waiting for the destination onto a truck.

        Raises DepotNotPrepared when more packages wait than the connection can carry.
        """
        depot, destination = self.depot, self.destination
        capacity = depot.connection_flow_capacity(destination)
        waiting = depot.stack_size(destination)
        if capacity < waiting:
            raise DepotNotPrepared(waiting - capacity)
        truck: list["Package"] = []
        while depot.stack_size(destination):
            package = depot.remove_package(destination)
            package.advance()
            package.toggle_transit()
            truck.append(package)
        return truck

    def transport_in(self, transit_time: int) -> None:
        """Run a package, destack or restock event at ``transit_time``."""
        if self.event_type == PACKAGE:
            self._store_package(transit_time)
        elif self.event_type == DESTACK:
            package = self.depot.remove_package(self.destination)
            self.depot.add_package(package, None)
        elif self.event_type == RESTOCK:
            if self.depot.stack_head(None).current == self.depot:
                self.depot.add_package(self.depot.remove_package(None), self.destination)
            else:
                raise RestockPending(1)

    def _store_package(self, time: int) -> None:
        package, depot = self.package, self.depot
        package.current = depot
        package.is_posted = True
        package.toggle_transit()
        package.increase_transit_time(time)
        if depot == package.destination:
            depot.add_package(package, depot)
            raise PackageDelivered()
        depot.add_package(package, package.next_depot())

    def delivered_package(self) -> "Package":
        """Take the delivered package out of its final depot."""
        current = self.package.current
        return current.remove_package(current)

    def change_pile(self, package: "Package") -> None:
        """Move ``package`` to the restock pile, or back from it to the destination pile."""
        depot = self.depot
        if depot.stack_size(None) and depot.stack_head(None) is package:
            depot.add_package(depot.remove_package(None), self.destination)
        elif depot.stack_size(self.destination) and depot.stack_head(self.destination) is package:
            depot.add_package(depot.remove_package(self.destination), None)
        else:
            raise ValueError("the package is not on top of either pile")

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.priority_key < other.priority_key

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.priority_key > other.priority_key

    def __str__(self) -> str:
        if self.package is not None:
            return f"{self.priority_key} pacote {self.package.package_id}"
        return (
            f"{self.priority_key} transporte "
            f"{self.depot.depot_id} {self.destination.depot_id}"
        )