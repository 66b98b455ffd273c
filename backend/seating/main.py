import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import get_settings
from .domain.errors import ValidationFailure, log_failure
from .routers import reservations
from .utils.request_id import REQUEST_ID_HEADER, resolve_request_id, set_request_id

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Seat Reservation API")

logger = logging.getLogger(__name__)


async def request_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
    set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        set_request_id(None)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


app.middleware("http")(request_id_middleware)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed input answers 400, like the domain validation failures.
    failure = ValidationFailure.create(exc)
    log_failure(failure, logger)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": failure.to_dict()})


app.add_exception_handler(RequestValidationError, validation_error_handler)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(reservations.router)
