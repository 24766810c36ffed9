# app/routes/server.py
import logging
from typing import AsyncIterator
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import StreamingResponse
from app.config import Settings, get_settings
from app.models.employee import generate_employee, get_faker
from app.schemas.employee import Employee
from app.utils.streaming import STREAM_JSON_MEDIA_TYPE, interval, ndjson_stream

logger = logging.getLogger(__name__)

router = APIRouter()

async def employee_stream(settings: Settings) -> AsyncIterator[Employee]:
    faker = get_faker(settings.FAKER_LOCALE)
    async for employee_id in interval(settings.STREAM_INTERVAL_SECONDS, settings.STREAM_LIMIT):
        yield generate_employee(employee_id, faker)

@router.get("", response_class=StreamingResponse)
async def get_employees(settings: Settings = Depends(get_settings)):
    logger.debug("Opening employee stream (interval=%ss)", settings.STREAM_INTERVAL_SECONDS)
    return StreamingResponse(
        ndjson_stream(employee_stream(settings)),
        media_type=STREAM_JSON_MEDIA_TYPE
    )

def echo(text: str) -> Response:
    # Raw text under a JSON content type, without JSON string quoting
    return Response(content=text, media_type="application/json")

@router.post("", response_class=Response)
async def post_info(request: Request):
    info = (await request.body()).decode("utf-8")
    return echo("post info :  " + info)

# Must be registered before /{info} so "uri" is not captured as a path variable
@router.get("/uri", response_class=Response)
async def uri_param(info: str):
    return echo("uri param -> key: info, value: " + info)

@router.get("/{info}", response_class=Response)
async def uri_path(info: str):
    return echo("uri param -> key: info, value: " + info)
