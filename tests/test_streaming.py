"""
Tests for the interval ticker and NDJSON framing.
"""

import asyncio
import json
import time

import pytest

from app.schemas.employee import Employee
from app.utils.streaming import interval, ndjson_stream


@pytest.mark.asyncio
async def test_interval_numbers_from_zero():
    ticks = [tick async for tick in interval(0, limit=5)]

    assert ticks == [0, 1, 2, 3, 4]


@pytest.mark.asyncio
async def test_interval_first_tick_is_immediate_then_periodic():
    start = time.monotonic()
    stamps = []
    async for _ in interval(0.1, limit=3):
        stamps.append(time.monotonic() - start)

    assert stamps[0] < 0.05
    assert stamps[1] >= 0.09
    assert stamps[2] >= 0.19


@pytest.mark.asyncio
async def test_interval_stops_when_consumer_is_cancelled():
    seen = []

    async def consume():
        async for tick in interval(10):
            seen.append(tick)

    task = asyncio.create_task(consume())
    await asyncio.sleep(0.05)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert seen == [0]


@pytest.mark.asyncio
async def test_ndjson_stream_writes_one_object_per_line():
    async def employees():
        for i in range(2):
            yield Employee(id=i, name="n", age=30, salary=5000, phone_number="p", address="a")

    chunks = [chunk async for chunk in ndjson_stream(employees())]

    assert len(chunks) == 2
    assert all(chunk.endswith(b"\n") for chunk in chunks)
    first = json.loads(chunks[0])
    assert first["id"] == 0
    assert first["phoneNumber"] == "p"
