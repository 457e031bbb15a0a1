"""Depots: storage points that keep one outgoing stack of packages per neighbour."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import TYPE_CHECKING, Any, Iterable, Optional

from depotsim.structures import Stack

if TYPE_CHECKING:
    from depotsim.package import Package

RESTOCK_TRANSPORT_TIME = 1
DELIVERED_TRANSPORT_TIME = 0


@dataclass
class _OutgoingStack:
    """Packages waiting at a depot to be moved towards one destination."""

    depot: Optional["Depot"]
    transport_time: int
    packages: Stack = field(default_factory=Stack)


class Depot:
    """A depot in the network.

    Besides one stack per connected depot, every depot has a restock stack
    (addressed with ``None``) used while digging packages out of a stack, and a
    stack addressed with the depot itself that holds packages delivered here.
    """

    def __init__(self, depot_id: int = -1, flow_capacity: int = 0) -> None:
        self.depot_id = depot_id
        self.leaving_capacity = flow_capacity
        self.entering_capacity = flow_capacity
        self._outgoing: dict[Depot, _OutgoingStack] = {}
        self._restock = _OutgoingStack(None, RESTOCK_TRANSPORT_TIME)
        self._delivered = _OutgoingStack(self, DELIVERED_TRANSPORT_TIME)

    def _stack_for(self, destination: Optional["Depot"]) -> _OutgoingStack:
        if destination is None:
            return self._restock
        if destination is self:
            return self._delivered
        try:
            return self._outgoing[destination]
        except KeyError:
            raise KeyError(
                f"depot {destination.depot_id} is not connected to depot {self.depot_id}"
            ) from None

    def find_connections(self, connections: Iterable["Depot"]) -> None:
        """Create the outgoing stacks from an adjacency list whose first entry is this depot."""
        self._outgoing = {
            destination: _OutgoingStack(
                destination, min(self.leaving_capacity, destination.entering_capacity)
            )
            for destination in islice(connections, 1, None)
        }
        self._restock = _OutgoingStack(None, RESTOCK_TRANSPORT_TIME)
        self._delivered = _OutgoingStack(self, DELIVERED_TRANSPORT_TIME)

    @property
    def destination_count(self) -> int:
        """Number of depots this depot is connected to."""
        return len(self._outgoing)

    def add_package(self, package: "Package", destination: Optional["Depot"]) -> None:
        """Put a package on top of the stack heading to ``destination``."""
        self._stack_for(destination).packages.push(package)

    def remove_package(self, destination: Optional["Depot"]) -> "Package":
        """Take the package on top of the stack heading to ``destination``."""
        stack = self._stack_for(destination).packages
        if not stack:
            raise IndexError("the stack has been exhausted")
        return stack.pop()

    def connection_flow_capacity(self, destination: Optional["Depot"]) -> int:
        """Packages that can travel at once from this depot to ``destination``."""
        target = self._stack_for(destination).depot
        if target is None:
            raise ValueError("the restock stack has no destination depot")
        return min(self.leaving_capacity, target.entering_capacity)

    def stack_size(self, destination: Optional["Depot"]) -> int:
        """Number of packages waiting for ``destination``."""
        return len(self._stack_for(destination).packages)

    def connections(self) -> list["Depot"]:
        """Depots this depot sends packages to, in connection order."""
        return list(self._outgoing)

    def transport_time(self, destination: Optional["Depot"]) -> int:
        """Transport time towards ``destination``."""
        return self._stack_for(destination).transport_time

    def stack_head(self, destination: Optional["Depot"]) -> "Package":
        """Package on top of the stack for ``destination``, left in place."""
        return self._stack_for(destination).packages.peek()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Depot):
            return NotImplemented
        return self.depot_id == other.depot_id

    def __hash__(self) -> int:
        return hash(self.depot_id)

    def __repr__(self) -> str:
        return f"Depot({self.depot_id}, {self.leaving_capacity})"