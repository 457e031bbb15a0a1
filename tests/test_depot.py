import pytest

from depotsim.depot import Depot


@pytest.fixture
def connected():
    a = Depot(0, 3)
    b = Depot(1, 5)
    c = Depot(2, 2)
    a.find_connections([a, b, c])
    b.find_connections([b, a])
    return a, b, c


def test_connections_skip_the_owner(connected):
    a, b, c = connected
    assert a.connections() == [b, c]
    assert a.destination_count == 2
    assert b.connections() == [a]


def test_packages_come_out_last_in_first_out(connected):
    a, b, _ = connected
    a.add_package("first", b)
    a.add_package("second", b)
    assert a.stack_size(b) == 2
    assert a.stack_head(b) == "second"
    assert a.remove_package(b) == "second"
    assert a.remove_package(b) == "first"
    assert a.stack_size(b) == 0


def test_removing_from_empty_stack_raises(connected):
    a, b, _ = connected
    with pytest.raises(IndexError):
        a.remove_package(b)


def test_unknown_destination_raises():
    a = Depot(0, 1)
    stranger = Depot(9, 1)
    a.find_connections([a])
    with pytest.raises(KeyError):
        a.add_package("p", stranger)
    with pytest.raises(KeyError):
        a.stack_size(stranger)


def test_stacks_are_separate(connected):
    a, b, c = connected
    a.add_package("to b", b)
    a.add_package("to c", c)
    a.add_package("restock", None)
    a.add_package("delivered", a)
    assert a.remove_package(None) == "restock"
    assert a.remove_package(a) == "delivered"
    assert a.remove_package(c) == "to c"
    assert a.remove_package(b) == "to b"


def test_flow_capacity_is_smaller_of_both_ends(connected):
    a, b, c = connected
    assert a.connection_flow_capacity(b) == 3
    assert b.connection_flow_capacity(a) == 3
    assert a.connection_flow_capacity(c) == 2


def test_flow_capacity_of_restock_stack_raises(connected):
    a, _, _ = connected
    with pytest.raises(ValueError):
        a.connection_flow_capacity(None)


def test_transport_times(connected):
    a, b, c = connected
    assert a.transport_time(b) == min(a.leaving_capacity, b.entering_capacity)
    assert a.transport_time(c) == c.entering_capacity
    assert a.transport_time(None) == 1
    assert a.transport_time(a) == 0


def test_stack_head_of_empty_stack_raises(connected):
    a, _, c = connected
    with pytest.raises(IndexError):
        a.stack_head(c)


def test_equality_and_hash_follow_id():
    assert Depot(4, 1) == Depot(4, 7)
    assert Depot(4, 1) != Depot(5, 1)
    assert len({Depot(4, 1), Depot(4, 2), Depot(5, 1)}) == 2


def test_default_depot():
    depot = Depot()
    assert depot.depot_id == -1
    assert depot.leaving_capacity == depot.entering_capacity == 0