"""Logs one line per incoming request before it reaches the routers."""
import logging

from fastapi import Request

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info("Request received: %s %s", request.method, target)
    return await call_next(request)
