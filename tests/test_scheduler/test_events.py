"""Tests for the EventLog and the exact text of each log line."""

from models.enums import Priority
from scheduler.events import (
    ALL_ASSIGNED,
    ALL_PROCESSED,
    EventLog,
    JobFinished,
    JobScheduled,
    PrinterOnline,
)


def test_line_formats():
    assert PrinterOnline(time=0, printer_id=2).render() == (
        "[TIME: 0] Printer 2 online, ready to take jobs."
    )
    assert JobScheduled(
        time=4, job_name="gear", priority=Priority.HIGH, printer_id=1, duration=6
    ).render() == "[TIME: 4] Job gear (HIGH) scheduled to printer 1, printing will take 6."
    assert JobFinished(time=10, job_name="gear", printer_id=1, wait_time=6).render() == (
        "[TIME: 10] Job gear has finished printing. Total wait time: 6."
    )


def test_render_has_no_trailing_newline():
    log = EventLog()
    log.append(PrinterOnline(time=0, printer_id=0))
    log.announce(ALL_ASSIGNED)
    log.announce(ALL_PROCESSED)

    assert log.render() == (
        "[TIME: 0] Printer 0 online, ready to take jobs.\n"
        "All print jobs have been assigned to a printer!\n"
        "All printing jobs have been processed!"
    )


def test_events_keep_emission_order():
    log = EventLog()
    log.append(JobFinished(time=5, job_name="b", printer_id=0, wait_time=5))
    log.append(PrinterOnline(time=0, printer_id=1))
    log.append(JobFinished(time=3, job_name="a", printer_id=1, wait_time=3))

    assert [e.job_name for e in log.finished()] == ["b", "a"]
    assert len(list(log)) == 3


def test_summary():
    log = EventLog()
    log.append(JobFinished(time=5, job_name="a", printer_id=0, wait_time=5))
    log.append(JobFinished(time=8, job_name="b", printer_id=0, wait_time=8))

    assert log.summary() == {"jobs_finished": 2, "makespan": 8, "average_wait": 6.5}


def test_summary_of_empty_run():
    assert EventLog().summary() == {"jobs_finished": 0, "makespan": 0, "average_wait": 0.0}
