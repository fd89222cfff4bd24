"""
Exception hierarchy for the print lab.

    LabError
    ├── PreconditionViolation   (also a ValueError)
    │   └── ArrivalOrderError
    └── InputFormatError        (also a ValueError, raised by adapters/)

Nothing here is retried: the simulation is deterministic, so every error is
a caller or input defect. The CLI and the API are the only places that catch
these and turn them into an exit code or an HTTP 422.
"""


class LabError(Exception):
    """Base class for every error raised by the simulator."""


class PreconditionViolation(LabError, ValueError):
    """A core operation was called with arguments that would corrupt time accounting."""


class ArrivalOrderError(PreconditionViolation):
    """A job arrived earlier than the lab clock (input not in arrival order)."""

    def __init__(self, job_name: str, arrival_time: int, current_time: int):
        self.job_name = job_name
        self.arrival_time = arrival_time
        self.current_time = current_time
        super().__init__(
            f"Job {job_name} arrives at {arrival_time} but the lab clock is "
            f"already at {current_time}; orders must be in non-decreasing arrival order"
        )


class InputFormatError(LabError, ValueError):
    """An orders or printer-count source could not be parsed."""
