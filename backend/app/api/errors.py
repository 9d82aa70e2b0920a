import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import NotFound, StorageError

logger = logging.getLogger(__name__)


def _describe(error: dict) -> str:
    # ('body', 'targetCount') -> 'body.targetCount: Input should be ...'
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc}: {error.get('msg', 'invalid')}"


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors and all(tuple(e.get("loc", ()))[:1] == ("path",) for e in errors):
        return JSONResponse(status_code=400, content={"message": "Invalid ID"})
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid input",
            "errors": [_describe(e) for e in errors],
        },
    )


async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"message": str(exc)})


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"message": "Storage failure"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
