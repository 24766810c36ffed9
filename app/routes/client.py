# app/routes/client.py
import logging
from typing import Any, AsyncIterator, Dict, Optional
from urllib.parse import quote
import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask
from app.config import Settings, get_settings
from app.schemas.employee import Employee
from app.utils.http_logging import log_request, log_response
from app.utils.streaming import STREAM_JSON_MEDIA_TYPE, ndjson_stream

logger = logging.getLogger(__name__)

router = APIRouter()

PROXY_PREFIX = "proxy -> "

def create_error_response(message: str, details: Optional[str] = None) -> Dict[str, Any]:
    """Create a detailed error response"""
    return {
        "message": message,
        "details": details if details else message
    }

def upstream_error(method: str, url: str, exc: Exception) -> HTTPException:
    logger.error("Upstream %s %s failed: %s", method, url, exc)
    return HTTPException(
        status_code=502,
        detail=create_error_response(
            message="Upstream call failed",
            details=f"{method} {url} -> {exc.__class__.__name__}: {exc}"
        )
    )

def get_upstream_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for outbound calls; None means the real network."""
    return None

def upstream_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    event_hooks: Optional[Dict[str, list]] = None
) -> httpx.AsyncClient:
    # None disables httpx's 5s default timeout
    return httpx.AsyncClient(
        base_url=settings.UPSTREAM_BASE_URL,
        transport=transport,
        event_hooks=event_hooks,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS
    )

def root_url(settings: Settings) -> str:
    # httpx appends "/" to the base path, which the upstream would answer with a redirect
    return settings.UPSTREAM_BASE_URL.rstrip("/")

async def fetch_reply(client: httpx.AsyncClient, method: str, url: str, **kwargs) -> str:
    """Call the upstream and return its body as text, unparsed."""
    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise upstream_error(method, url, exc)
    return response.text

def proxy_reply(reply: str) -> Response:
    return Response(content=PROXY_PREFIX + reply, media_type="application/json")

async def open_employee_stream(
    client: httpx.AsyncClient,
    settings: Settings
) -> httpx.Response:
    """Send the upstream stream request and check its status before any byte goes to the caller."""
    url = root_url(settings)
    response = None
    try:
        response = await client.send(client.build_request("GET", url), stream=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        await close_upstream(response, client)
        raise upstream_error("GET", url, exc)
    return response

async def close_upstream(response: Optional[httpx.Response], client: httpx.AsyncClient) -> None:
    if response is not None:
        await response.aclose()
    await client.aclose()

async def proxied_employees(
    response: httpx.Response,
    client: httpx.AsyncClient,
    settings: Settings
) -> AsyncIterator[Employee]:
    try:
        async for line in response.aiter_lines():
            if not line.strip():
                continue
            employee = Employee.model_validate_json(line)
            logger.debug("Received %r", employee)
            if employee.age < settings.AGE_THRESHOLD:
                yield employee
    finally:
        await close_upstream(response, client)
        logger.debug("Upstream employee stream closed")

@router.get("", response_class=StreamingResponse)
async def proxy_employees(
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport)
):
    client = upstream_client(settings, transport)
    response = await open_employee_stream(client, settings)
    return StreamingResponse(
        ndjson_stream(proxied_employees(response, client, settings)),
        media_type=STREAM_JSON_MEDIA_TYPE,
        # Covers a caller that disconnects before the generator starts
        background=BackgroundTask(close_upstream, response, client)
    )

@router.post("", response_class=Response)
async def proxy_post(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport)
):
    body = await request.body()
    async with upstream_client(settings, transport) as client:
        reply = await fetch_reply(
            client,
            "POST",
            root_url(settings),
            content=body,
            headers={"Content-Type": "text/plain; charset=utf-8"}
        )
    return proxy_reply(reply)

@router.get("/uri", response_class=Response)
async def proxy_uri(
    info: str,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport)
):
    async with upstream_client(settings, transport) as client:
        reply = await fetch_reply(client, "GET", "/uri", params={"info": info})
    return proxy_reply(reply)

@router.get("/{info}", response_class=Response)
async def proxy_uri_path(
    info: str,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport)
):
    event_hooks = {"request": [log_request], "response": [log_response]}
    async with upstream_client(settings, transport, event_hooks) as client:
        reply = await fetch_reply(client, "GET", "/" + quote(info, safe=""))
    return proxy_reply(reply)
