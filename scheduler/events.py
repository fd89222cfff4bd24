"""
Event channel for a lab run.

The Lab and every Printer receive the same EventLog instance at construction
and append typed events to it. Nothing writes to a global buffer: whoever
builds the lab owns the log and decides where it ends up (stdout, a file,
an HTTP response).

Each event knows how to render itself as exactly one line of the output log:

    [TIME: 0] Printer 0 online, ready to take jobs.
    [TIME: 0] Job cube (NORMAL) scheduled to printer 0, printing will take 5.
    [TIME: 5] Job cube has finished printing. Total wait time: 5.
    All print jobs have been assigned to a printer!
    All printing jobs have been processed!
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Union

from models.enums import Priority

logger = logging.getLogger(__name__)

ALL_ASSIGNED = "All print jobs have been assigned to a printer!"
ALL_PROCESSED = "All printing jobs have been processed!"


@dataclass(frozen=True)
class PrinterOnline:
    time: int
    printer_id: int

    def render(self) -> str:
        return f"[TIME: {self.time}] Printer {self.printer_id} online, ready to take jobs."


@dataclass(frozen=True)
class JobScheduled:
    time: int
    job_name: str
    priority: Priority
    printer_id: int
    duration: int

    def render(self) -> str:
        return (
            f"[TIME: {self.time}] Job {self.job_name} ({self.priority.value}) "
            f"scheduled to printer {self.printer_id}, printing will take {self.duration}."
        )


@dataclass(frozen=True)
class JobFinished:
    time: int
    job_name: str
    printer_id: int
    wait_time: int

    def render(self) -> str:
        return (
            f"[TIME: {self.time}] Job {self.job_name} has finished printing. "
            f"Total wait time: {self.wait_time}."
        )


@dataclass(frozen=True)
class Announcement:
    message: str

    def render(self) -> str:
        return self.message


LabEvent = Union[PrinterOnline, JobScheduled, JobFinished, Announcement]


class EventLog:
    """Append-only, ordered record of everything that happened in one run."""

    def __init__(self):
        self._events: list[LabEvent] = []

    def append(self, event: LabEvent) -> None:
        self._events.append(event)
        logger.debug(event.render())

    def announce(self, message: str) -> None:
        self.append(Announcement(message))

    @property
    def events(self) -> tuple[LabEvent, ...]:
        return tuple(self._events)

    def lines(self) -> list[str]:
        return [event.render() for event in self._events]

    def render(self) -> str:
        """The full log as text, one event per line, no trailing newline."""
        return "\n".join(self.lines())

    def finished(self) -> list[JobFinished]:
        return [e for e in self._events if isinstance(e, JobFinished)]

    def summary(self) -> dict:
        """
        Aggregate completion statistics.

        makespan is the time of the last completion (0 for an empty run);
        average_wait is rounded to 3 decimals.
        """
        finished = self.finished()
        if not finished:
            return {"jobs_finished": 0, "makespan": 0, "average_wait": 0.0}
        return {
            "jobs_finished": len(finished),
            "makespan": max(e.time for e in finished),
            "average_wait": round(sum(e.wait_time for e in finished) / len(finished), 3),
        }

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[LabEvent]:
        return iter(self.events)
