# storefront/api/errors.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed body/params never reach a service; 400 instead of FastAPI's 422
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
