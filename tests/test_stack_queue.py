import pytest

from studylab.stack_queue import EmptyContainerError, Queue, Stack, is_balanced


def test_stack_push_top_pop():
    stack = Stack()
    stack.push(5)
    stack.push(6)
    assert stack.top() == 6
    assert stack.pop() == 6
    assert stack.top() == 5
    assert not stack.is_empty()
    assert stack.pop() == 5
    assert stack.is_empty()


def test_stack_empty_errors():
    stack = Stack()
    with pytest.raises(EmptyContainerError):
        stack.pop()
    with pytest.raises(EmptyContainerError):
        stack.top()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_stack_iterates_top_down():
    stack = Stack([1, 2, 3])
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_stack_str():
    stack = Stack([5, 6])
    assert str(stack) == "[6,5,]"
    assert str(Stack()) == "[]"


def test_stack_copy_is_independent():
    original = Stack(["a", "b"])
    duplicate = original.copy()
    duplicate.pop()
    duplicate.push("z")
    assert list(original) == ["b", "a"]
    assert list(duplicate) == ["z", "a"]


def test_queue_front_back_dequeue():
    queue = Queue()
    queue.enqueue(5)
    queue.enqueue(6)
    queue.enqueue(7)
    assert queue.front() == 7
    assert queue.back() == 5
    assert queue.dequeue() == 5
    assert queue.back() == 6
    assert queue.dequeue() == 6
    assert queue.dequeue() == 7
    assert queue.is_empty()


def test_queue_empty_errors():
    queue = Queue()
    with pytest.raises(EmptyContainerError):
        queue.dequeue()
    with pytest.raises(EmptyContainerError):
        queue.front()
    with pytest.raises(EmptyContainerError):
        queue.back()


def test_queue_iterates_in_leaving_order():
    items = [4, 8, 15, 16]
    queue = Queue(items)
    assert list(queue) == items
    assert [queue.dequeue() for _ in range(len(queue))] == items


def test_queue_str():
    assert str(Queue([5, 6, 7])) == "[5,6,7,]"


def test_queue_copy_is_independent():
    original = Queue([1, 2])
    duplicate = original.copy()
    duplicate.enqueue(3)
    assert list(original) == [1, 2]
    assert list(duplicate) == [1, 2, 3]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", True),
        ("()", True),
        ("(())()", True),
        ("(a(b)c)", True),
        (")(", False),
        ("(()", False),
        ("())", False),
    ],
)
def test_is_balanced(text, expected):
    assert is_balanced(text) is expected