"""Exception handlers: volume engine failures become 400s."""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.errors import VolumeError


def _volume_error_response(request: Request, exc: VolumeError) -> JSONResponse:
    logger.warning("{} {} rejected: {}", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"status": "fail", "error": type(exc).__name__, "message": str(exc)},
    )


async def volume_error_handler(request: Request, exc: VolumeError) -> JSONResponse:
    return _volume_error_response(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request bodies whose weight/reps/unit the engine refused get the engine's 400."""
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, VolumeError):
            return _volume_error_response(request, cause)
    return await request_validation_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VolumeError, volume_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
