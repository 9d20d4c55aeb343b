import pytest

from nemomaze.containers import Queue, Stack


def test_stack_is_lifo():
    stack = Stack()
    for name in ["Feynman", "Turing", "Einstein"]:
        stack.push(name)
    popped = []
    while not stack.empty():
        popped.append(stack.peek())
        stack.pop()
    assert popped == ["Einstein", "Turing", "Feynman"]


def test_stack_str_shows_top_first():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    assert str(stack) == "b a"


def test_stack_pop_empty_is_silent_and_peek_raises():
    stack = Stack()
    stack.pop()
    assert stack.empty()
    with pytest.raises(IndexError):
        stack.peek()


def test_queue_is_fifo():
    queue = Queue()
    for name in ["Bohr", "Einstein", "Turing", "Feynman"]:
        queue.enqueue(name)
    queue.dequeue()
    queue.dequeue()
    assert str(queue) == "Turing Feynman"
    assert queue.peek() == "Turing"


def test_queue_dequeue_empty_is_silent_and_peek_raises():
    queue = Queue()
    queue.dequeue()
    assert queue.empty()
    with pytest.raises(IndexError):
        queue.peek()


def test_stack_to_queue_transfer_preserves_pop_order():
    stack = Stack()
    queue = Queue()
    for value in range(5):
        stack.push(value)
    while not stack.empty():
        queue.enqueue(stack.peek())
        stack.pop()
    drained = []
    while not queue.empty():
        drained.append(queue.peek())
        queue.dequeue()
    assert drained == list(reversed(range(5)))