"""Network of depots kept as adjacency lists."""

from __future__ import annotations

from itertools import islice
from typing import Optional

from depotsim.depot import Depot
from depotsim.structures import LinkedList, Queue


class Graph:
    """Fixed number of vertices; each adjacency list starts with its own depot."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices cannot be negative")
        self.vertex_count = vertices
        self._lists: list[LinkedList[Depot]] = [LinkedList() for _ in range(vertices)]

    @property
    def adjacency_lists(self) -> list[LinkedList[Depot]]:
        """Every adjacency list, in vertex order."""
        return list(self._lists)

    def _list_of(self, source: Depot) -> Optional[LinkedList[Depot]]:
        return next(
            (adj for adj in self._lists if not adj.is_empty() and adj.front() == source),
            None,
        )

    def add_vertex(self, depot: Depot) -> int:
        """Place a depot in the first free vertex slot and return that slot."""
        for index, adj in enumerate(self._lists):
            if adj.is_empty():
                adj.push_back(depot)
                return index
        raise IndexError("there is no room for a new vertex")

    def add_edge(self, source: Depot, destination: Depot) -> None:
        """Connect ``source`` to ``destination``; an unknown source is only added as a vertex."""
        adj = self._list_of(source)
        if adj is None:
            self.add_vertex(source)
        else:
            adj.push_back(destination)

    def add_edge_by_index(self, index1: int, index2: int) -> None:
        """Connect the depot at vertex ``index1`` to the depot at vertex ``index2``."""
        first, second = self._lists[index1], self._lists[index2]
        if first.is_empty() or second.is_empty():
            raise ValueError("both vertices must exist before they can be connected")
        first.push_back(second.front())

    def adjacency(self, source: Depot) -> LinkedList[Depot]:
        """Copy of the adjacency list of ``source``, starting with ``source`` itself."""
        adj = self._list_of(source)
        if adj is None:
            raise ValueError("the depot does not belong to the network")
        return adj.copy()

    def set_edge_connections(self, index: int) -> None:
        """Let the depot at vertex ``index`` set up its outgoing stacks."""
        adj = self._lists[index]
        adj.front().find_connections(adj)

    def shortest_path(self, start: Depot, finish: Depot) -> LinkedList[Depot]:
        """Breadth-first path from ``start`` to ``finish``, both included.

        When ``finish`` cannot be reached the path holds ``finish`` alone.
        """
        explored = {start}
        previous: dict[Depot, Depot] = {}
        queue: Queue[Depot] = Queue(max(self.vertex_count, 1))
        queue.enqueue(start)

        while queue:
            current = queue.dequeue()
            if current == finish:
                break
            for neighbour in islice(self.adjacency(current), 1, None):
                if neighbour not in explored:
                    queue.enqueue(neighbour)
                    explored.add(neighbour)
                    previous[neighbour] = current

        path: LinkedList[Depot] = LinkedList()
        at: Optional[Depot] = finish
        while at is not None:
            path.push_front(at)
            at = previous.get(at)
        return path