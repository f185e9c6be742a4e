# tests/test_node.py
from multitrie.core.node import Node


def test_child_list_absent_is_none():
    n = Node(0)
    assert n.child_list("a") is None
    assert not n.is_terminal


def test_append_child_keeps_order_and_duplicates_per_char():
    root = Node(0)
    a1, a2 = Node(1), Node(2)
    root.append_child("a", a1)
    root.append_child("a", a2)
    assert root.child_list("a") == [a1, a2]


def test_set_child_list_replaces():
    root = Node(0)
    root.append_child("a", Node(1))
    b = Node(2)
    root.set_child_list("a", [b])
    assert root.child_list("a") == [b]


def test_values_accumulate_without_uniqueness():
    n = Node(3)
    n.add_value("x")
    n.add_value("x")
    assert n.values == ("x", "x")
    assert n.is_terminal


def test_clear_is_shallow():
    root, child, grandchild = Node(0), Node(1), Node(2)
    root.append_child("a", child)
    child.append_child("b", grandchild)
    grandchild.add_value(1)
    root.clear()
    assert root.children == {}
    assert child.child_list("b") == [grandchild]
    assert grandchild.values == (1,)


def test_dispose_is_deep():
    root, child, grandchild = Node(0), Node(1), Node(2)
    root.append_child("a", child)
    child.append_child("b", grandchild)
    grandchild.add_value(1)
    root.dispose()
    assert root.children == {}
    assert child.children == {}
    assert grandchild.values == ()


def test_dispose_long_chain_does_not_recurse():
    root = node = Node(0)
    for i in range(1, 20000):
        nxt = Node(i)
        node.append_child("x", nxt)
        node = nxt
    root.dispose()
    assert root.children == {}
