"""
API integration tests for /simulations.

These use the test HTTP client from conftest.py, which talks to the FastAPI
app in-process.
"""

import pytest


@pytest.mark.asyncio
async def test_run_simulation(client):
    """POST /simulations/ should run the lab and return its log and stats."""
    response = await client.post("/simulations/", json={
        "printer_count": 1,
        "jobs": [
            {"name": "A", "duration": 5, "arrival_time": 0},
            {"name": "B", "duration": 3, "arrival_time": 0, "priority": "HIGH"},
        ],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["printer_count"] == 1
    assert data["log"] == [
        "[TIME: 0] Printer 0 online, ready to take jobs.",
        "[TIME: 0] Job A (NORMAL) scheduled to printer 0, printing will take 5.",
        "[TIME: 0] Job B (HIGH) scheduled to printer 0, printing will take 3.",
        "All print jobs have been assigned to a printer!",
        "[TIME: 5] Job A has finished printing. Total wait time: 5.",
        "[TIME: 8] Job B has finished printing. Total wait time: 8.",
        "All printing jobs have been processed!",
    ]
    assert data["finished"] == [
        {"name": "A", "printer_id": 0, "finished_at": 5, "wait_time": 5},
        {"name": "B", "printer_id": 0, "finished_at": 8, "wait_time": 8},
    ]
    assert data["summary"] == {"jobs_finished": 2, "makespan": 8, "average_wait": 6.5}


@pytest.mark.asyncio
async def test_run_simulation_without_jobs(client):
    response = await client.post("/simulations/", json={"printer_count": 2})

    assert response.status_code == 200
    assert response.json()["summary"]["jobs_finished"] == 0
    assert len(response.json()["log"]) == 4


@pytest.mark.asyncio
async def test_out_of_order_jobs_rejected(client):
    response = await client.post("/simulations/", json={
        "printer_count": 1,
        "jobs": [
            {"name": "late", "duration": 2, "arrival_time": 5},
            {"name": "early", "duration": 2, "arrival_time": 1},
        ],
    })

    assert response.status_code == 422
    assert "early" in response.json()["detail"]


@pytest.mark.asyncio
async def test_zero_printers_rejected(client):
    response = await client.post("/simulations/", json={"printer_count": 0, "jobs": []})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_invalid_job_rejected(client):
    response = await client.post("/simulations/", json={
        "printer_count": 1,
        "jobs": [{"name": "gear", "duration": 0, "arrival_time": 0}],
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_priority_rejected(client):
    response = await client.post("/simulations/", json={
        "printer_count": 1,
        "jobs": [{"name": "gear", "duration": 1, "arrival_time": 0, "priority": "URGENT"}],
    })
    assert response.status_code == 422
