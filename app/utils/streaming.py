# app/utils/streaming.py
import asyncio
from typing import AsyncIterable, AsyncIterator, Optional
from pydantic import BaseModel

STREAM_JSON_MEDIA_TYPE = "application/stream+json"

async def interval(period: float, limit: Optional[int] = None) -> AsyncIterator[int]:
    """Yield 0, 1, 2, ... with the first tick immediate and then one every `period` seconds.

    Runs forever unless `limit` is given. Cancelling the consumer cancels the
    pending sleep.
    """
    tick = 0
    while limit is None or tick < limit:
        if tick:
            await asyncio.sleep(period)
        yield tick
        tick += 1

async def ndjson_stream(items: AsyncIterable[BaseModel]) -> AsyncIterator[bytes]:
    """Serialize each model as its own JSON line."""
    async for item in items:
        yield (item.model_dump_json(by_alias=True) + "\n").encode("utf-8")
