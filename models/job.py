"""
PrintJob - one print request travelling through the lab.

Key design decisions:
- Plain dataclass, no I/O: the scheduler layer can build and inspect jobs in
  tests without touching files or the API
- name / duration / arrival_time / priority are the job's identity: they are
  set once at construction and reassigning them raises FrozenInstanceError
- remaining and status are the only fields that change while the job prints,
  and they only change through start_printing() / consume() / finish()

Lifecycle:
    WAITING ──start_printing()──> PRINTING ──consume() to 0, finish()──> FINISHED
"""

from dataclasses import FrozenInstanceError, dataclass, field

from models.enums import JobStatus, Priority
from models.errors import PreconditionViolation

_IDENTITY_FIELDS = frozenset({"name", "duration", "arrival_time", "priority"})


@dataclass
class PrintJob:
    name: str
    duration: int                        # total printing duration (time units)
    arrival_time: int                    # simulated time the job entered the lab
    priority: Priority = Priority.NORMAL
    remaining: int = field(init=False)
    status: JobStatus = field(default=JobStatus.WAITING, init=False)

    def __post_init__(self) -> None:
        if not self.name or any(ch.isspace() for ch in self.name):
            raise PreconditionViolation(f"Job name must be a non-empty token, got {self.name!r}")
        if self.duration <= 0:
            raise PreconditionViolation(f"Job {self.name} duration must be positive, got {self.duration}")
        if self.arrival_time < 0:
            raise PreconditionViolation(
                f"Job {self.name} arrival time must be non-negative, got {self.arrival_time}"
            )
        self.priority = Priority(self.priority)
        self.remaining = self.duration

    def __setattr__(self, attr: str, value) -> None:
        # remaining is the last field set during construction
        if attr in _IDENTITY_FIELDS and "remaining" in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {attr!r} of job {self.name}")
        super().__setattr__(attr, value)

    # ── Lifecycle ───────────────────────────────────────────────
    def start_printing(self) -> None:
        if self.status is not JobStatus.WAITING:
            raise PreconditionViolation(f"Job {self.name} cannot start printing from {self.status.value}")
        self.status = JobStatus.PRINTING

    def consume(self, units: int) -> None:
        """Print this job for `units` time units. Never goes below zero."""
        if self.status is not JobStatus.PRINTING:
            raise PreconditionViolation(f"Job {self.name} is not printing ({self.status.value})")
        if units < 0 or units > self.remaining:
            raise PreconditionViolation(
                f"Job {self.name} cannot consume {units} units with {self.remaining} remaining"
            )
        self.remaining -= units

    def finish(self) -> None:
        if self.status is not JobStatus.PRINTING or self.remaining != 0:
            raise PreconditionViolation(
                f"Job {self.name} cannot finish ({self.status.value}, {self.remaining} remaining)"
            )
        self.status = JobStatus.FINISHED

    def wait_time(self, finish_time: int) -> int:
        """Elapsed simulated time between arrival and `finish_time`."""
        return finish_time - self.arrival_time

    @property
    def is_high_priority(self) -> bool:
        return self.priority is Priority.HIGH

    def __repr__(self) -> str:
        return f"<PrintJob {self.name} [{self.priority.value}] {self.status.value} {self.remaining}/{self.duration}>"
