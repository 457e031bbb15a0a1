import pytest

from depotsim.depot import Depot
from depotsim.graph import Graph
from depotsim.package import Package


@pytest.fixture
def line():
    depots = [Depot(i, 1) for i in range(3)]
    graph = Graph(3)
    for depot in depots:
        graph.add_vertex(depot)
    for i, j in [(0, 1), (1, 0), (1, 2), (2, 1)]:
        graph.add_edge_by_index(i, j)
    return graph, depots


def test_new_package_state():
    a, b = Depot(0, 1), Depot(1, 1)
    package = Package(7, a, b)
    assert package.package_id == 7
    assert package.current is a
    assert package.origin is a
    assert package.destination is b
    assert package.in_transit is True
    assert package.is_posted is False


def test_set_path_uses_shortest_path(line):
    graph, (a, b, c) = line
    package = Package(1, a, c)
    package.set_path(graph)
    assert list(package.path) == [a, b, c]
    assert package.next_depot() is b


def test_advance_moves_along_path(line):
    graph, (a, b, c) = line
    package = Package(1, a, c)
    package.set_path(graph)
    package.advance()
    assert package.is_posted is True
    assert package.current is a
    assert package.next_depot() is c
    package.advance()
    assert package.current is b
    assert package.next_depot() is None


def test_advance_past_end_raises(line):
    graph, (a, b, _) = line
    package = Package(1, a, b)
    package.set_path(graph)
    package.advance()
    with pytest.raises(IndexError):
        package.advance()


def test_next_depot_without_path():
    package = Package(1, Depot(0, 1), Depot(1, 1))
    assert package.next_depot() is None


def test_toggle_transit_flips_state():
    package = Package(1)
    package.toggle_transit()
    assert package.in_transit is False
    package.toggle_transit()
    assert package.in_transit is True


def test_time_bookkeeping_measures_from_last_change():
    package = Package(1)
    package.increase_transit_time(5)
    assert package.transit_time == 5
    assert package.last_time_change == 5
    package.increase_stored_time(5)
    assert package.stored_time == 0
    package.increase_transit_time(9)
    assert package.transit_time == 9 - 5


def test_equality_and_hash_follow_id():
    assert Package(3) == Package(3, Depot(0, 1), Depot(1, 1))
    assert Package(3) != Package(4)
    assert len({Package(3), Package(3), Package(4)}) == 2