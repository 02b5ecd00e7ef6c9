import pytest

from dsakit.queues import LinkedQueue, StackQueue


@pytest.mark.parametrize("factory", [LinkedQueue, StackQueue])
def test_fifo_order(factory):
    queue = factory().enqueue(1).enqueue(2).enqueue(3)
    drained = []
    while not queue.is_empty():
        drained.append(queue.dequeue())
    assert drained == [1, 2, 3]


@pytest.mark.parametrize("factory", [LinkedQueue, StackQueue])
def test_peek_returns_front_without_removing(factory):
    queue = factory().enqueue("a").enqueue("b")
    assert queue.peek() == "a"
    assert queue.dequeue() == "a"
    assert queue.peek() == "b"


@pytest.mark.parametrize("factory", [LinkedQueue, StackQueue])
def test_empty_queue_raises(factory):
    queue = factory()
    with pytest.raises(IndexError, match="Queue is empty"):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_stack_queue_interleaved_operations():
    queue = StackQueue().enqueue(1).enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3).enqueue(4)
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]
    assert queue.is_empty()


def test_stack_queue_matches_linked_queue():
    linked, stacked = LinkedQueue(), StackQueue()
    for value in range(25):
        linked.enqueue(value)
        stacked.enqueue(value)
        if value % 3 == 0:
            assert linked.dequeue() == stacked.dequeue()
    while not linked.is_empty():
        assert linked.dequeue() == stacked.dequeue()
    assert stacked.is_empty()


def test_linked_queue_iteration():
    queue = LinkedQueue().enqueue(4).enqueue(5)
    assert list(queue) == [4, 5]


def test_linked_queue_str():
    assert str(LinkedQueue().enqueue(1).enqueue(2).enqueue(3)) == "{ 1 <- 2 <- 3 }"
    assert str(LinkedQueue()) == "{  }"


def test_nested_linked_queue_str():
    inner1 = LinkedQueue().enqueue(1).enqueue(2).enqueue(3)
    inner2 = LinkedQueue().enqueue(4).enqueue(5).enqueue(6)
    outer = LinkedQueue().enqueue(inner1).enqueue(inner2)
    assert str(outer) == "{ { 1 <- 2 <- 3 } <- { 4 <- 5 <- 6 } }"
    assert list(outer.dequeue()) == [1, 2, 3]