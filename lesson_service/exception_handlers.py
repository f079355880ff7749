import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from lesson_service.errors import LessonServiceError, PersistenceError

logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: LessonServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Domain error on %s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("Request rejected on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    error = PersistenceError()
    return JSONResponse(status_code=error.status_code, content={"message": error.message})


async def static_not_found_handler(request: Request, exc: StarletteHTTPException):
    prefix = request.app.state.settings.static_prefix
    path = request.url.path
    if exc.status_code == 404 and (path == prefix or path.startswith(prefix.rstrip("/") + "/")):
        return PlainTextResponse("404: File Not Found", status_code=404)
    return await http_exception_handler(request, exc)


EXCEPTION_HANDLERS = {
    LessonServiceError: domain_error_handler,
    SQLAlchemyError: persistence_error_handler,
    StarletteHTTPException: static_not_found_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
