"""Packages travelling through the depot network."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from depotsim.structures import LinkedList

if TYPE_CHECKING:
    from depotsim.depot import Depot
    from depotsim.graph import Graph


class Package:
    """A package with its route and timing bookkeeping."""

    def __init__(
        self,
        package_id: int = 0,
        origin: Optional["Depot"] = None,
        destination: Optional["Depot"] = None,
    ) -> None:
        self.package_id = package_id
        self.origin = origin
        self.destination = destination
        self.current = origin
        self.path: LinkedList["Depot"] = LinkedList()
        self.path_index = 0
        self.stored_time = 0
        self.transit_time = 0
        self.last_time_change = 0
        self.is_posted = False
        self.in_transit = True

    def set_path(self, graph: "Graph") -> None:
        """Route the package along the shortest path from origin to destination."""
        self.path = graph.shortest_path(self.origin, self.destination)

    def advance(self) -> None:
        """Mark the package as posted and move one step along its path."""
        self.is_posted = True
        if self.path_index + 1 >= len(self.path):
            raise IndexError("the package is already at the end of its path")
        self.current = self.path[self.path_index]
        self.path_index += 1

    def next_depot(self) -> Optional["Depot"]:
        """Depot after the current position in the path, or None at the end."""
        if len(self.path) > self.path_index + 1:
            return self.path[self.path_index + 1]
        return None

    def toggle_transit(self) -> None:
        """Switch between being in transit and being stored."""
        self.in_transit = not self.in_transit

    def increase_transit_time(self, time: int) -> None:
        """Record the time spent in transit since the last state change."""
        self.transit_time = time - self.last_time_change
        self.last_time_change = time

    def increase_stored_time(self, time: int) -> None:
        """Record the time spent stored since the last state change."""
        self.stored_time = time - self.last_time_change
        self.last_time_change = time

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return self.package_id == other.package_id

    def __hash__(self) -> int:
        return hash(self.package_id)

    def __repr__(self) -> str:
        return f"Package({self.package_id})"