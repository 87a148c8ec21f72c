import pytest

from campus_nav.routing.heap import MinHeap


def test_pops_in_ascending_priority():
    h = MinHeap()
    for item, p in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
        h.push(item, p)
    assert len(h) == 4
    assert [h.pop()[0] for _ in range(4)] == ["a", "b", "c", "d"]
    assert not h


def test_equal_priorities_pop_fifo_without_comparing_items():
    h = MinHeap()
    # dicts are not orderable; seq must break the tie
    first, second, third = {"n": 1}, {"n": 2}, {"n": 3}
    h.push(first, 5.0)
    h.push(second, 5.0)
    h.push(third, 1.0)
    assert h.pop() == (third, 1.0)
    assert h.pop()[0] is first
    assert h.pop()[0] is second


def test_peek_does_not_remove():
    h = MinHeap()
    h.push("x", 2.0)
    assert h.peek() == ("x", 2.0)
    assert len(h) == 1


def test_empty_heap_raises_index_error():
    h = MinHeap()
    with pytest.raises(IndexError):
        h.pop()
    with pytest.raises(IndexError):
        h.peek()
