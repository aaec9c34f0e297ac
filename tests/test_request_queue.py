import pytest

from foodbank.request_queue import FoodRequest, RequestQueue


def test_new_queue_is_empty():
    queue = RequestQueue()
    assert len(queue) == 0
    assert not queue
    assert list(queue) == []


def test_fifo_order():
    queue = RequestQueue()
    queue.enqueue(1, 10)
    queue.enqueue(2, 20)
    queue.enqueue(3, 30)
    assert [r.recipient_id for r in queue] == [1, 2, 3]
    assert queue.dequeue() == FoodRequest(1, 10)
    assert queue.dequeue() == FoodRequest(2, 20)
    assert len(queue) == 1


def test_urgent_goes_to_front():
    queue = RequestQueue()
    queue.enqueue(1, 10)
    queue.enqueue(2, 20, urgent=True)
    queue.enqueue(3, 30)
    assert [r.recipient_id for r in queue] == [2, 1, 3]


def test_urgent_on_empty_then_normal_appends_after():
    queue = RequestQueue()
    queue.enqueue(5, 1, urgent=True)
    queue.enqueue(6, 2)
    assert [r.recipient_id for r in queue] == [5, 6]


def test_dequeue_empty_raises():
    queue = RequestQueue()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_drain_then_reuse():
    queue = RequestQueue()
    queue.enqueue(1, 4)
    queue.dequeue()
    assert not queue
    queue.enqueue(7, 8)
    assert queue.dequeue() == FoodRequest(7, 8)


def test_render_lines():
    queue = RequestQueue()
    queue.enqueue(101, 5)
    queue.enqueue(102, 7)
    assert queue.render() == (
        "Request ID: 101 | Quantity: 5kg\n"
        "Request ID: 102 | Quantity: 7kg\n"
    )


def test_render_empty():
    assert RequestQueue().render() == ""