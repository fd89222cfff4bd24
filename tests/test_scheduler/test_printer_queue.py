"""Tests for PrinterQueue - a plain FIFO with a read-only remaining-time total."""

from scheduler.printer_queue import PrinterQueue


def test_dequeue_order_matches_enqueue_order(make_job):
    queue = PrinterQueue()
    queue.enqueue(make_job("first"))
    queue.enqueue(make_job("second"))
    queue.enqueue(make_job("third"))

    assert queue.dequeue().name == "first"
    assert queue.dequeue().name == "second"
    assert queue.dequeue().name == "third"


def test_empty_queue(make_job):
    queue = PrinterQueue()
    assert queue.is_empty()
    assert queue.dequeue() is None
    assert queue.front() is None
    assert queue.total_remaining() == 0


def test_front_does_not_remove(make_job):
    queue = PrinterQueue()
    queue.enqueue(make_job("a"))
    queue.enqueue(make_job("b"))

    assert queue.front().name == "a"
    assert queue.front().name == "a"
    assert queue.size() == 2


def test_total_remaining_keeps_order(make_job):
    queue = PrinterQueue()
    queue.enqueue(make_job("a", duration=4))
    queue.enqueue(make_job("b", duration=1))
    queue.enqueue(make_job("c", duration=2))

    assert queue.total_remaining() == 7
    assert [job.name for job in queue] == ["a", "b", "c"]
    assert len(queue) == 3


def test_total_remaining_tracks_partial_progress(make_job):
    queue = PrinterQueue()
    head = make_job("a", duration=4)
    queue.enqueue(head)
    queue.enqueue(make_job("b", duration=3))

    head.start_printing()
    head.consume(3)

    assert queue.total_remaining() == 4
