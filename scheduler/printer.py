"""
Printer - executes jobs against its own simulated clock.

Each printer owns two FIFO queues (HIGH and NORMAL) and at most one in-flight
job. Selection rules:

- A job added to an idle printer starts printing immediately
- When the in-flight job finishes, the next one is the front of HIGH if HIGH
  has anything waiting, otherwise the front of NORMAL
- A HIGH job arriving while a NORMAL job is printing waits for it; nothing
  is ever preempted

Time only moves through print_for_duration(). It walks forward job by job:

    left = 7, in-flight job has 3 remaining
    ├── consume 3 → job finishes at clock+3, next job starts, left = 4
    ├── consume 4 from the next job (or idle for 4 if nothing is queued)
    └── clock advanced by exactly 7
"""

from typing import Optional

from models.enums import JobStatus
from models.errors import PreconditionViolation
from models.job import PrintJob
from scheduler.events import EventLog, JobFinished, PrinterOnline
from scheduler.printer_queue import PrinterQueue


class Printer:

    def __init__(self, printer_id: int, event_log: EventLog):
        self._printer_id = printer_id
        self._log = event_log
        self._high = PrinterQueue()
        self._normal = PrinterQueue()
        self._in_flight: Optional[PrintJob] = None
        self._current_time = 0

        self._log.append(PrinterOnline(time=self._current_time, printer_id=printer_id))

    @property
    def printer_id(self) -> int:
        return self._printer_id

    def current_time(self) -> int:
        return self._current_time

    # ── Queue inspection ────────────────────────────────────────
    def current_job(self) -> Optional[PrintJob]:
        """The job being printed, or the one that would print next, or None."""
        if self._in_flight is not None:
            return self._in_flight
        return self._next_waiting()

    def is_empty(self) -> bool:
        return self._high.is_empty() and self._normal.is_empty()

    def time_to_finish_high(self) -> int:
        return self._high.total_remaining()

    def time_to_finish_normal(self) -> int:
        return self._normal.total_remaining()

    def queued_jobs(self) -> list[PrintJob]:
        """Every job still on this printer, HIGH queue first."""
        return [*self._high, *self._normal]

    # ── Mutation ────────────────────────────────────────────────
    def add_job(self, job: PrintJob) -> None:
        """
        Raises:
            PreconditionViolation: if the job is already printing or finished.
        """
        if job.status is not JobStatus.WAITING:
            raise PreconditionViolation(
                f"Printer {self._printer_id} cannot take job {job.name} ({job.status.value})"
            )
        self._queue_for(job).enqueue(job)
        if self._in_flight is None:
            self._start(job)

    def print_for_duration(self, duration: int) -> None:
        """
        Advance the clock by `duration`, printing whatever is queued.

        Raises:
            PreconditionViolation: if duration is negative.
        """
        if duration < 0:
            raise PreconditionViolation(
                f"Printer {self._printer_id} cannot print for a negative duration ({duration})"
            )

        left = duration
        while left > 0 and self._in_flight is not None:
            step = min(left, self._in_flight.remaining)
            self._in_flight.consume(step)
            self._current_time += step
            left -= step
            if self._in_flight.remaining == 0:
                self._finish_in_flight()

        # Nothing left to print: the rest is idle time
        self._current_time += left

    def print_until_time(self, target_time: int) -> None:
        if target_time < self._current_time:
            raise PreconditionViolation(
                f"Printer {self._printer_id} is at {self._current_time}, "
                f"cannot print until earlier time {target_time}"
            )
        self.print_for_duration(target_time - self._current_time)

    # ── Internals ───────────────────────────────────────────────
    def _queue_for(self, job: PrintJob) -> PrinterQueue:
        return self._high if job.is_high_priority else self._normal

    def _next_waiting(self) -> Optional[PrintJob]:
        return self._high.front() if not self._high.is_empty() else self._normal.front()

    def _start(self, job: PrintJob) -> None:
        job.start_printing()
        self._in_flight = job

    def _finish_in_flight(self) -> None:
        job = self._in_flight
        job.finish()

        removed = self._queue_for(job).dequeue()
        if removed is not job:
            raise PreconditionViolation(
                f"Printer {self._printer_id} finished {job.name} but it was not at the front of its queue"
            )

        self._log.append(JobFinished(
            time=self._current_time,
            job_name=job.name,
            printer_id=self._printer_id,
            wait_time=job.wait_time(self._current_time),
        ))

        self._in_flight = None
        nxt = self._next_waiting()
        if nxt is not None:
            self._start(nxt)

    def __repr__(self) -> str:
        return (
            f"<Printer {self._printer_id} t={self._current_time} "
            f"high={len(self._high)} normal={len(self._normal)}>"
        )
