"""
Pydantic schemas for the /simulations endpoint.

These are NOT the scheduler's types - they define the HTTP API contract:
- JobIn: one job in the request body
- SimulationRequest: printer count + jobs in arrival order
- FinishedJob / SimulationSummary / SimulationResponse: what a run produced

FastAPI validates incoming data against these automatically.
If someone sends duration=0, FastAPI returns a 422 error before the lab runs.
"""

from pydantic import BaseModel, Field

from config.settings import settings
from models.enums import Priority
from models.job import PrintJob


class JobIn(BaseModel):
    """A single print job as submitted over HTTP."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        pattern=r"^\S+$",
        examples=["gear"],
    )
    duration: int = Field(..., gt=0, description="Printing duration in time units")
    arrival_time: int = Field(..., ge=0, description="Simulated arrival time")
    priority: Priority = Priority.NORMAL

    def to_job(self) -> PrintJob:
        return PrintJob(
            name=self.name,
            duration=self.duration,
            arrival_time=self.arrival_time,
            priority=self.priority,
        )


class SimulationRequest(BaseModel):
    """Request body for POST /simulations/. Jobs must be in arrival order."""

    printer_count: int = Field(..., ge=1, le=settings.MAX_PRINTERS)
    jobs: list[JobIn] = Field(default_factory=list, max_length=settings.MAX_JOBS_PER_REQUEST)


class FinishedJob(BaseModel):
    name: str
    printer_id: int
    finished_at: int
    wait_time: int


class SimulationSummary(BaseModel):
    jobs_finished: int
    makespan: int           # time of the last completion
    average_wait: float


class SimulationResponse(BaseModel):
    """Response body for POST /simulations/."""

    printer_count: int
    log: list[str]                 # the log lines, in order
    finished: list[FinishedJob]    # completions, in order
    summary: SimulationSummary
