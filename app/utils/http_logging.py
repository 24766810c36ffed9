# app/utils/http_logging.py
import logging
import httpx

logger = logging.getLogger(__name__)

async def log_request(request: httpx.Request) -> None:
    logger.info("Sending request %s %s", request.method, request.url)

async def log_response(response: httpx.Response) -> None:
    for name, value in response.headers.multi_items():
        logger.info("Response header: %s %s", name, value)
