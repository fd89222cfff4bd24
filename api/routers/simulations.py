"""
Simulation endpoint.

POST /simulations/ → run a whole lab in-process and return its log

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Build the jobs and run the lab
- Return the response

A run is deterministic and finishes in one request, so nothing is stored.
"""

import logging

from fastapi import APIRouter, HTTPException

from api.schemas.simulation import (
    FinishedJob,
    SimulationRequest,
    SimulationResponse,
    SimulationSummary,
)
from models.errors import PreconditionViolation
from scheduler.lab import simulate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/", response_model=SimulationResponse)
async def run_simulation(request: SimulationRequest) -> SimulationResponse:
    """
    Run the lab over the submitted jobs.

    Jobs whose arrival time goes backwards are rejected with 422; the lab
    never re-sorts its input.
    """
    try:
        log = simulate(request.printer_count, [job.to_job() for job in request.jobs])
    except PreconditionViolation as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info(f"Simulated {len(request.jobs)} job(s) on {request.printer_count} printer(s)")
    return SimulationResponse(
        printer_count=request.printer_count,
        log=log.lines(),
        finished=[
            FinishedJob(
                name=e.job_name,
                printer_id=e.printer_id,
                finished_at=e.time,
                wait_time=e.wait_time,
            )
            for e in log.finished()
        ],
        summary=SimulationSummary(**log.summary()),
    )
