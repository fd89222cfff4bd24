"""
Shared test fixtures.

The lab runs entirely in memory, so the only infrastructure to replace is the
HTTP server: httpx.AsyncClient with ASGITransport talks to the FastAPI app
in-process, no network involved.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from models.enums import Priority
from models.job import PrintJob


@pytest.fixture
def make_job():
    """Factory for PrintJobs with sensible defaults."""

    def _make_job(name: str, duration: int = 1, arrival_time: int = 0,
                  priority: Priority = Priority.NORMAL) -> PrintJob:
        return PrintJob(name=name, duration=duration, arrival_time=arrival_time, priority=priority)

    return _make_job


@pytest_asyncio.fixture
async def client():
    """Create a test HTTP client that talks directly to the FastAPI app."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
