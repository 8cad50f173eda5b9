import pytest

from dstructs.queues import MAX_SIZE, ArrayQueue, LinkedQueue, QueueEmpty, QueueFull

KINDS = ["array", "linked"]


@pytest.mark.parametrize("kind", KINDS)
def test_sequence(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    queue.enqueue(2)
    queue.enqueue(4)
    queue.enqueue(6)
    assert queue.dequeue() == 2
    queue.enqueue(8)
    assert list(queue) == [4, 6, 8]
    assert str(queue) == "4 6 8 "
    assert queue.front() == 4
    assert len(queue) == 3


@pytest.mark.parametrize("kind", KINDS)
def test_empty_errors(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    assert queue.is_empty()
    with pytest.raises(QueueEmpty):
        queue.dequeue()
    with pytest.raises(QueueEmpty):
        queue.front()


@pytest.mark.parametrize("kind", KINDS)
def test_drains_and_refills(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    values = [1, 2, 3]
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()
    assert len(queue) == 0
    queue.enqueue(9)
    assert list(queue) == [9]


def test_array_queue_wraps_around():
    queue = ArrayQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.is_full()
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3
    assert queue.is_full()


def test_array_queue_full_raises():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFull):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_array_queue_default_capacity():
    queue = ArrayQueue()
    assert queue.capacity == MAX_SIZE == 101
    for value in range(MAX_SIZE):
        queue.enqueue(value)
    with pytest.raises(QueueFull):
        queue.enqueue(0)


def test_array_queue_single_slot():
    queue = ArrayQueue(1)
    queue.enqueue(7)
    assert queue.is_full()
    assert queue.dequeue() == 7
    assert queue.is_empty()


def test_array_queue_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)