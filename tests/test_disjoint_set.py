import networkx as nx
import pytest

from nx_mst.disjoint_set import DisjointSet
from nx_mst.result import OperationCounter


@pytest.mark.unit
def test_singletons():
    ds = DisjointSet("ABC")
    assert len(ds) == 3
    assert "A" in ds and "Z" not in ds
    for node in "ABC":
        assert ds.find(node) == node
        assert ds.rank(node) == 0
    assert not ds.connected("A", "B")


@pytest.mark.unit
def test_union_and_connected():
    ds = DisjointSet("ABCD")
    assert ds.union("A", "B") is True
    assert ds.connected("A", "B")
    assert not ds.connected("A", "C")
    assert ds.union("B", "A") is False
    assert ds.union("C", "D") is True
    assert ds.union("A", "D") is True
    assert all(ds.connected("A", x) for x in "BCD")


@pytest.mark.unit
def test_union_by_rank():
    ds = DisjointSet("ABCDE")
    ds.union("A", "B")
    # rank tie: first root becomes the parent and gains a rank
    assert ds.find("B") == "A"
    assert ds.rank("A") == 1

    # lower rank root goes under the higher one, rank unchanged
    ds.union("C", "A")
    assert ds.find("C") == "A"
    assert ds.rank("A") == 1

    ds.union("D", "E")
    ds.union("A", "D")
    assert ds.find("E") == "A"
    assert ds.rank("A") == 2


@pytest.mark.unit
def test_path_compression():
    ds = DisjointSet("ABCD")
    ds.union("A", "B")
    ds.union("C", "D")
    ds.union("A", "C")
    assert ds._parent["D"] == "C"
    assert ds.find("D") == "A"
    assert ds._parent["D"] == "A"


@pytest.mark.unit
def test_long_chain_find_is_iterative():
    n = 50_000
    ds = DisjointSet(range(n))
    # hand-built worst case chain 0 -> 1 -> ... -> n-1
    for i in range(n - 1):
        ds._parent[i] = i + 1
    assert ds.find(0) == n - 1
    assert all(ds._parent[i] == n - 1 for i in range(n))


@pytest.mark.unit
def test_unknown_node():
    ds = DisjointSet("AB")
    with pytest.raises(nx.NodeNotFound):
        ds.find("Z")
    with pytest.raises(nx.NodeNotFound):
        ds.union("A", "Z")


@pytest.mark.unit
def test_operations_are_counted():
    counter = OperationCounter()
    ds = DisjointSet("ABC", counter)
    assert ds.counter is counter
    assert counter.count == 6
    ds.find("A")
    assert counter.count == 7
    before = counter.count
    ds.union("A", "B")
    assert counter.count > before
    before = counter.count
    ds.connected("A", "C")
    assert counter.count > before


@pytest.mark.unit
def test_separate_sets_have_separate_counters():
    a = DisjointSet("AB")
    b = DisjointSet("AB")
    a.union("A", "B")
    assert b.counter.count == 4
    assert a.counter.count > b.counter.count
