import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hotdesk.core.exceptions import BookingError, NotFoundError
from hotdesk.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    if isinstance(exc, NotFoundError):
        logger.warning("%s %s -> %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(error=exc.code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
