import pytest

from codedrills.queue_stack import Queue, QueueStack


def test_queue_stack_sequence():
    s = QueueStack()
    with pytest.raises(IndexError, match="Stack is empty"):
        s.pop()
    s.push(1)
    s.push(2)
    s.push(3)
    assert s.pop() == 3
    assert s.pop() == 2
    s.push(4)
    s.push(5)
    assert s.is_empty() is False
    assert s.pop() == 5
    assert s.pop() == 4
    assert s.pop() == 1
    with pytest.raises(IndexError, match="Stack is empty"):
        s.pop()
    assert s.is_empty() is True


def test_queue_fifo():
    q = Queue()
    q.enqueue("a")
    q.enqueue("b")
    assert len(q) == 2
    assert q.peek() == "a"
    assert q.dequeue() == "a"
    assert q.dequeue() == "b"
    assert q.is_empty()


def test_queue_empty_errors():
    q = Queue()
    with pytest.raises(IndexError, match="Queue is empty"):
        q.dequeue()
    with pytest.raises(IndexError, match="Queue is empty"):
        q.peek()