import pytest

from studylab.heap import HeapFullError, MinHeap, left, parent, right
from studylab.stack_queue import EmptyContainerError


def test_child_indices_of_root():
    assert left(0) == 1
    assert right(0) == 2


@pytest.mark.parametrize("index", range(0, 30))
def test_parent_of_children_is_index(index):
    assert parent(left(index)) == index
    assert parent(right(index)) == index


def test_root_is_its_own_parent():
    assert parent(0) == 0


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        left(-1)


def test_source_example_prints_in_order():
    heap = MinHeap([1, 16, 13, 5, 3, 7])
    assert str(heap) == "[1,3,5,7,13,16,]"
    assert len(heap) == 6


def test_str_does_not_consume():
    heap = MinHeap([4, 2, 9])
    str(heap)
    assert len(heap) == 3
    assert heap.peek() == 2


def test_pop_yields_sorted_order():
    data = [9, 4, 7, 1, 8, 2, 2, 6]
    heap = MinHeap()
    for value in data:
        heap.push(value)
    assert [heap.pop() for _ in range(len(data))] == sorted(data)
    assert len(heap) == 0


def test_peek_returns_minimum():
    heap = MinHeap([5, 3, 8])
    heap.push(1)
    assert heap.peek() == 1


def test_push_beyond_capacity_raises():
    heap = MinHeap(max_size=2)
    heap.push(1)
    heap.push(2)
    with pytest.raises(HeapFullError):
        heap.push(3)


def test_default_capacity():
    heap = MinHeap(range(20))
    with pytest.raises(HeapFullError):
        heap.push(99)


def test_too_many_initial_items_raise():
    with pytest.raises(HeapFullError):
        MinHeap([1, 2, 3], max_size=2)


def test_pop_empty_raises():
    with pytest.raises(EmptyContainerError):
        MinHeap().pop()


def test_peek_empty_raises():
    with pytest.raises(EmptyContainerError):
        MinHeap().peek()


def test_copy_is_independent():
    heap = MinHeap([3, 1, 2])
    duplicate = heap.copy()
    duplicate.pop()
    assert len(heap) == 3
    assert len(duplicate) == 2
    assert duplicate.max_size == heap.max_size