"""Tests for the orders / printer-count file adapters."""

import pytest

from adapters.orders import (
    OrderRecord,
    parse_order_line,
    read_orders,
    read_printer_count,
    write_log,
)
from models.enums import JobStatus, Priority
from models.errors import InputFormatError


def test_parse_valid_line():
    record = parse_order_line("3 ana gear 5 2 HIGH")

    assert record == OrderRecord(
        arrival_time=3, client="ana", name="gear", duration=5, printer_hint=2, priority=Priority.HIGH
    )


def test_record_to_job():
    job = parse_order_line("0 ana gear 5 2 NORMAL").to_job()

    assert job.name == "gear"
    assert job.duration == 5
    assert job.arrival_time == 0
    assert job.priority is Priority.NORMAL
    assert job.status is JobStatus.WAITING


@pytest.mark.parametrize("line", [
    "3 ana gear 5 2",                  # missing priority
    "3 ana gear 5 2 HIGH extra",       # too many fields
    "x ana gear 5 2 HIGH",             # non-integer arrival
    "3 ana gear five 2 HIGH",          # non-integer duration
    "3 ana gear 0 2 HIGH",             # zero duration
    "-1 ana gear 5 2 HIGH",            # negative arrival
    "3 ana gear 5 2 URGENT",           # unknown priority
])
def test_malformed_lines_raise(line):
    with pytest.raises(InputFormatError, match="Line 7"):
        parse_order_line(line, line_number=7)


def test_read_orders_keeps_file_order_and_skips_blanks(tmp_path):
    path = tmp_path / "orders.txt"
    path.write_text("0 ana gear 5 2 NORMAL\n\n1 rui clip 3 2 HIGH\n   \n")

    jobs = read_orders(path)

    assert [job.name for job in jobs] == ["gear", "clip"]
    assert jobs[1].priority is Priority.HIGH


def test_read_orders_reports_line_number(tmp_path):
    path = tmp_path / "orders.txt"
    path.write_text("0 ana gear 5 2 NORMAL\n1 rui clip 3 2 LOW\n")

    with pytest.raises(InputFormatError, match="Line 2"):
        read_orders(path)


def test_read_orders_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_orders(tmp_path / "nope.txt")


def test_read_printer_count(tmp_path):
    path = tmp_path / "printers.txt"
    path.write_text("3\n")
    assert read_printer_count(path) == 3


@pytest.mark.parametrize("content", ["", "abc", "0", "-2"])
def test_bad_printer_count_raises(tmp_path, content):
    path = tmp_path / "printers.txt"
    path.write_text(content)
    with pytest.raises(InputFormatError):
        read_printer_count(path)


def test_write_log_creates_directories(tmp_path):
    target = tmp_path / "out" / "nested" / "output1.txt"
    write_log(target, "line one\nline two")
    assert target.read_text() == "line one\nline two"
