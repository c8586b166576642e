import pytest

from hashtable.node import MISSING, Node


def test_set_value_returns_previous():
    node = Node(1, "k", "old")

    assert node.set_value("new") == "old"
    assert node.value == "new"


def test_key_and_hash_are_read_only():
    node = Node(1, "k", "v")

    with pytest.raises(AttributeError):
        node.key = "other"
    with pytest.raises(AttributeError):
        node.hash = 2


def test_equality_ignores_hash_and_next():
    tail = Node(3, "t", 0)

    assert Node(1, "k", "v") == Node(2, "k", "v", tail)
    assert Node(1, "k", "v") != Node(1, "k", "w")
    assert Node(1, "k", "v") != Node(1, "j", "v")
    assert Node(0, None, None) == Node(0, None, None)
    assert Node(1, "k", "v") != "k, v"


def test_hash_combines_key_and_value():
    assert hash(Node(0, None, None)) == 0
    assert hash(Node(9, "k", None)) == hash("k")
    assert hash(Node(9, "k", 5)) == hash("k") ^ hash(5)


def test_str():
    assert str(Node(1, "k", 5)) == "k, 5"
    assert str(Node(0, None, None)) == "None, None"


def test_missing_sentinel():
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert MISSING is not None
