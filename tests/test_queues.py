from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from classicds.queues import (
    CircularQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
    TwoStackQueue,
)


def test_circular_queue_source_example():
    queue = CircularQueue()
    for value in [10, 100, 1000]:
        queue.enqueue(value)
    assert len(queue) == 3
    assert queue.dequeue() == 10
    assert list(queue) == [100, 1000]


def test_circular_queue_default_capacity_is_ten():
    queue = CircularQueue()
    for value in range(10):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(10)


def test_circular_queue_wraps_around():
    queue = CircularQueue(capacity=4)
    for value in [1, 2, 3, 4]:
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    queue.enqueue(5)
    queue.enqueue(6)
    assert queue.is_full()
    assert list(queue) == [3, 4, 5, 6]
    assert [queue.dequeue() for _ in range(4)] == [3, 4, 5, 6]
    assert queue.is_empty()


def test_circular_queue_empty_dequeue_raises():
    queue = CircularQueue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_circular_queue_rejects_bad_capacity():
    with pytest.raises(ValueError):
        CircularQueue(capacity=0)


@given(st.lists(st.one_of(st.integers(), st.none()), max_size=60))
def test_circular_queue_matches_deque(operations):
    queue = CircularQueue(capacity=5)
    model = deque()
    for op in operations:
        if op is None:
            if model:
                assert queue.dequeue() == model.popleft()
            else:
                with pytest.raises(QueueEmptyError):
                    queue.dequeue()
        elif len(model) < 5:
            queue.enqueue(op)
            model.append(op)
        else:
            with pytest.raises(QueueFullError):
                queue.enqueue(op)
        assert list(queue) == list(model)
        assert len(queue) == len(model)


def test_linked_queue_source_example():
    queue = LinkedQueue()
    for value in [12, 13, 80]:
        queue.enqueue(value)
    assert len(queue) == 3
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [12, 13, 80]
    assert len(queue) == 0


def test_linked_queue_display_after_deletes():
    queue = LinkedQueue()
    for value in [1, 2, 3, 4]:
        queue.enqueue(value)
    assert list(queue) == [1, 2, 3, 4]
    queue.dequeue()
    assert list(queue) == [2, 3, 4]
    queue.dequeue()
    assert list(queue) == [3, 4]
    queue.dequeue()
    assert list(queue) == [4]


def test_linked_queue_front_and_clear():
    queue = LinkedQueue()
    queue.enqueue("x")
    queue.enqueue("y")
    assert queue.front() == "x"
    assert len(queue) == 2
    queue.clear()
    assert queue.is_empty()
    with pytest.raises(QueueEmptyError):
        queue.front()
    queue.enqueue("z")
    assert list(queue) == ["z"]


def test_linked_queue_reusable_after_draining():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    queue.enqueue(2)
    queue.enqueue(3)
    assert list(queue) == [2, 3]


def test_linked_queue_empty_dequeue_raises():
    with pytest.raises(QueueEmptyError):
        LinkedQueue().dequeue()


@given(st.lists(st.integers()))
def test_linked_queue_fifo(values):
    queue = LinkedQueue()
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values


def test_two_stack_queue_source_example():
    queue = TwoStackQueue()
    for value in [1, 2, 3]:
        queue.enqueue(value)
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [1, 2, 3]
    assert len(queue) == 0


def test_two_stack_queue_empty_raises():
    with pytest.raises(QueueEmptyError):
        TwoStackQueue().dequeue()


@given(st.lists(st.integers(), max_size=40))
def test_two_stack_queue_fifo(values):
    queue = TwoStackQueue()
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values