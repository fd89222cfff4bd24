"""
Lab - the core orchestrator.

The lab owns a fixed pool of printers and drives every one of them in
lock-step: all printer clocks are equal whenever control returns to the lab.
A run has two phases:

    1. Dispatch: for each arriving job (in arrival order)
       → advance every printer to the next horizon until the lab clock
         reaches the job's arrival time
       → pick a printer (HIGH and NORMAL use different rules), enqueue
    2. Drain: once every job is assigned
       → advance every printer to the next completion until all are empty

A horizon is the next moment something observable happens: the earliest
completion of any in-flight job, or the arrival of the next job, whichever
comes first. Stepping horizon by horizon means an assignment decision is
always made against the real state of every queue at that instant.

          orders                    Lab                      EventLog
    ┌──────────────┐       ┌──────────────────┐      ┌────────────────┐
    │ PrintJob ... │──────>│ sync → assign    │─────>│ online/sched/  │
    │ (by arrival) │process│ drain → finished │ emit │ finished lines │
    └──────────────┘       └──────────────────┘      └────────────────┘
"""

import logging
from typing import Iterable, Optional

from models.enums import JobStatus
from models.errors import ArrivalOrderError, PreconditionViolation
from models.job import PrintJob
from scheduler.events import ALL_ASSIGNED, ALL_PROCESSED, EventLog, JobScheduled
from scheduler.printer import Printer

logger = logging.getLogger(__name__)


class Lab:
    """
    Assigns print jobs to printers and advances simulated time.

    The lab doesn't print anything itself; it decides WHERE each job goes
    and WHEN every printer is allowed to move forward.
    """

    def __init__(self, printer_count: int, event_log: Optional[EventLog] = None):
        if printer_count < 1:
            raise PreconditionViolation(f"A lab needs at least one printer, got {printer_count}")

        self._log = event_log if event_log is not None else EventLog()
        self._printers = [Printer(i, self._log) for i in range(printer_count)]
        logger.info(f"Lab online with {printer_count} printer(s)")

    @property
    def printers(self) -> tuple[Printer, ...]:
        return tuple(self._printers)

    @property
    def event_log(self) -> EventLog:
        return self._log

    @property
    def current_time(self) -> int:
        """Lab clock. Printer 0 stands in for all of them because of lock-step."""
        return self._printers[0].current_time()

    # ── Driving the run ─────────────────────────────────────────
    def take_orders(self, jobs: Iterable[PrintJob]) -> EventLog:
        """
        Dispatch every job in order, then print until every printer is empty.

        Returns the event log so callers can render it wherever they like.
        """
        dispatched = 0
        for job in jobs:
            self.process_job(job)
            dispatched += 1

        self._log.announce(ALL_ASSIGNED)
        logger.info(f"Dispatched {dispatched} job(s), draining printers from t={self.current_time}")

        while not self.is_printing_finished():
            reference = self._printers[self.first_printer_to_finish_job()]
            horizon = self.current_time + reference.current_job().remaining
            self._advance_all(horizon)

        self._log.announce(ALL_PROCESSED)
        logger.info(f"All printing finished at t={self.current_time}")
        return self._log

    def process_job(self, job: PrintJob) -> int:
        """
        Bring the lab up to the job's arrival time, then assign it.

        Returns the id of the printer the job was scheduled to.

        Raises:
            PreconditionViolation: if the job was already scheduled.
            ArrivalOrderError: if the job arrives before the current lab clock.
        """
        if job.status is not JobStatus.WAITING:
            raise PreconditionViolation(f"Job {job.name} was already scheduled ({job.status.value})")
        if job.arrival_time < self.current_time:
            raise ArrivalOrderError(job.name, job.arrival_time, self.current_time)

        while self.current_time < job.arrival_time:
            self._advance_all(self._next_horizon(job.arrival_time))

        if job.is_high_priority:
            printer_id = self.first_printer_to_finish_high()
        else:
            printer_id = self.first_printer_to_finish()
        self._printers[printer_id].add_job(job)

        self._log.append(JobScheduled(
            time=self.current_time,
            job_name=job.name,
            priority=job.priority,
            printer_id=printer_id,
            duration=job.duration,
        ))
        return printer_id

    def is_printing_finished(self) -> bool:
        return all(p.is_empty() for p in self._printers)

    # ── Printer selection ───────────────────────────────────────
    def first_printer_to_finish(self) -> int:
        """Printer with the least total backlog. Ties go to the lowest id."""
        best = 0
        best_total = self._backlog(self._printers[0])
        for i, printer in enumerate(self._printers[1:], start=1):
            total = self._backlog(printer)
            if total < best_total:
                best, best_total = i, total
        return best

    def first_printer_to_finish_high(self) -> int:
        """
        Printer that clears its HIGH backlog first.

        NORMAL backlog only breaks ties; remaining ties go to the lowest id.
        """
        best = 0
        best_high = self._printers[0].time_to_finish_high()
        best_normal = self._printers[0].time_to_finish_normal()
        for i, printer in enumerate(self._printers[1:], start=1):
            high = printer.time_to_finish_high()
            normal = printer.time_to_finish_normal()
            if high < best_high or (high == best_high and normal < best_normal):
                best, best_high, best_normal = i, high, normal
        return best

    def first_printer_to_finish_job(self) -> int:
        """
        Printer whose current job completes soonest.

        Only used as the reference for the next synchronisation horizon,
        never to choose where a job goes. Returns 0 when every printer is
        empty, in which case printer 0 has no current job.
        """
        best: Optional[int] = None
        best_remaining = 0
        for i, printer in enumerate(self._printers):
            job = printer.current_job()
            if job is None:
                continue
            if best is None or job.remaining < best_remaining:
                best, best_remaining = i, job.remaining
        return 0 if best is None else best

    # ── Internals ───────────────────────────────────────────────
    @staticmethod
    def _backlog(printer: Printer) -> int:
        return printer.time_to_finish_high() + printer.time_to_finish_normal()

    def _next_horizon(self, arrival_time: int) -> int:
        reference = self._printers[self.first_printer_to_finish_job()].current_job()
        if reference is None:
            return arrival_time
        return min(self.current_time + reference.remaining, arrival_time)

    def _advance_all(self, target_time: int) -> None:
        for printer in self._printers:
            printer.print_until_time(target_time)


def simulate(printer_count: int, jobs: Iterable[PrintJob]) -> EventLog:
    """Run a complete lab over `jobs` and return its event log."""
    lab = Lab(printer_count)
    return lab.take_orders(jobs)
