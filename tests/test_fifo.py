from cdrills.fifo import Queue


def test_queue():
    queue = Queue()
    assert len(queue) == 0
    assert queue.peek() is None
    assert queue.dequeue() is None

    queue.enqueue("a")
    assert len(queue) == 1
    assert queue.peek() == "a"

    queue.enqueue("b")
    assert len(queue) == 2
    assert queue.peek() == "a"

    assert queue.dequeue() == "a"
    assert queue.dequeue() == "b"

    assert len(queue) == 0
    assert queue.peek() is None
    assert queue.dequeue() is None


def test_peek_follows_dequeue():
    queue = Queue()
    for item in ("x", "y", "z"):
        queue.enqueue(item)
    assert queue.dequeue() == "x"
    assert queue.peek() == "y"
    assert len(queue) == 2


def test_many_items_keep_fifo_order():
    queue = Queue()
    for value in range(50):
        queue.enqueue(value)
    assert len(queue) == 50
    assert [queue.dequeue() for _ in range(50)] == list(range(50))
    assert queue.dequeue() is None


def test_enqueue_after_drain():
    queue = Queue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    queue.enqueue(2)
    queue.enqueue(3)
    assert queue.peek() == 2
    assert queue.dequeue() == 2
    assert queue.dequeue() == 3
    assert len(queue) == 0