import pytest

from depotsim.depot import Depot
from depotsim.graph import Graph


def build(matrix, capacity=2):
    graph = Graph(len(matrix))
    depots = [Depot(i, capacity) for i in range(len(matrix))]
    for depot in depots:
        graph.add_vertex(depot)
    for row_index, row in enumerate(matrix):
        for col_index, value in enumerate(row):
            if value == 1:
                graph.add_edge_by_index(row_index, col_index)
        graph.set_edge_connections(row_index)
    return graph, depots


def test_add_vertex_fills_slots_in_order():
    graph = Graph(2)
    a, b = Depot(0, 1), Depot(1, 1)
    assert graph.add_vertex(a) == 0
    assert graph.add_vertex(b) == 1
    assert [adj.front() for adj in graph.adjacency_lists] == [a, b]


def test_add_vertex_when_full_raises():
    graph = Graph(1)
    graph.add_vertex(Depot(0, 1))
    with pytest.raises(IndexError):
        graph.add_vertex(Depot(1, 1))


def test_adjacency_starts_with_source():
    graph, (a, b, c) = build([[0, 1, 1], [1, 0, 0], [1, 0, 0]])
    assert list(graph.adjacency(a)) == [a, b, c]
    assert list(graph.adjacency(b)) == [b, a]


def test_adjacency_returns_a_copy():
    graph, (a, b) = build([[0, 1], [1, 0]])
    copy = graph.adjacency(a)
    copy.clear()
    assert list(graph.adjacency(a)) == [a, b]


def test_adjacency_of_unknown_depot_raises():
    graph, _ = build([[0]])
    with pytest.raises(ValueError):
        graph.adjacency(Depot(7, 1))


def test_add_edge_by_index_needs_both_vertices():
    graph = Graph(2)
    graph.add_vertex(Depot(0, 1))
    with pytest.raises(ValueError):
        graph.add_edge_by_index(0, 1)


def test_add_edge_by_depot():
    graph = Graph(2)
    a, b = Depot(0, 1), Depot(1, 1)
    graph.add_vertex(a)
    graph.add_vertex(b)
    graph.add_edge(a, b)
    assert list(graph.adjacency(a)) == [a, b]


def test_add_edge_with_unknown_source_only_adds_vertex():
    graph = Graph(2)
    a, b = Depot(0, 1), Depot(1, 1)
    graph.add_vertex(b)
    graph.add_edge(a, b)
    assert list(graph.adjacency(a)) == [a]


def test_set_edge_connections_configures_depot():
    _, (a, b, c) = build([[0, 1, 1], [0, 0, 0], [0, 0, 0]])
    assert a.connections() == [b, c]
    assert b.connections() == []


def test_shortest_path_along_a_line():
    graph, (a, b, c) = build([[0, 1, 0], [1, 0, 1], [0, 1, 0]])
    assert list(graph.shortest_path(a, c)) == [a, b, c]
    assert list(graph.shortest_path(c, a)) == [c, b, a]


def test_shortest_path_prefers_fewer_hops():
    matrix = [
        [0, 1, 0, 1],
        [1, 0, 1, 0],
        [0, 1, 0, 1],
        [1, 0, 1, 0],
    ]
    graph, (a, b, c, d) = build(matrix)
    path = list(graph.shortest_path(a, d))
    assert path == [a, d]
    longer = list(graph.shortest_path(a, c))
    assert longer[0] == a and longer[-1] == c
    assert len(longer) == 3


def test_shortest_path_to_itself():
    graph, (a, _) = build([[0, 1], [1, 0]])
    assert list(graph.shortest_path(a, a)) == [a]


def test_unreachable_destination_gives_only_destination():
    graph, (a, b) = build([[0, 0], [0, 0]])
    assert list(graph.shortest_path(a, b)) == [b]