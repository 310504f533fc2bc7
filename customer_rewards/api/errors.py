"""Maps domain and validation failures onto HTTP error responses"""

import logging
from typing import Any, Dict, Sequence, Union
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from customer_rewards.api.dependencies import get_request_id
from customer_rewards.api.rewards.schemas import ErrorDetails
from customer_rewards.domain.exceptions import ErrorKind, RewardsError

STATUS_BY_KIND = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.INVALID_TRANSACTION: 400,
    ErrorKind.INVALID_DATE_FORMAT: 400,
    ErrorKind.CUSTOMER_NOT_FOUND: 404,
    ErrorKind.UNHANDLED: 500,
}


def request_description(request: Request) -> str:
    return f"uri={request.url.path}"


def field_path(loc: Sequence[Union[str, int]]) -> str:
    """Render a pydantic error location as `transaction[0].amount`"""
    parts = list(loc)
    if parts and parts[0] in ("body", "query", "path"):
        parts = parts[1:]

    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "body"


async def rewards_error_handler(request: Request, exc: RewardsError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    log = logging.error if status_code >= 500 else logging.warning
    log(f"{exc.kind.name}: {exc.message}", extra={"request_id": get_request_id(request)})

    body = ErrorDetails(statusCode=status_code, message=exc.message, details=request_description(request))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Field-level validation failures come back as a field -> message mapping"""
    errors: Dict[str, Any] = {}
    for error in exc.errors():
        errors.setdefault(field_path(error["loc"]), error["msg"])

    logging.warning("Request validation failed", extra={"request_id": get_request_id(request), "fields": list(errors)})
    return JSONResponse(status_code=400, content=errors)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for failures no route translated into a RewardsError"""
    logging.error(f"Unhandled error: {exc!r}", extra={"request_id": get_request_id(request)})

    body = ErrorDetails(
        statusCode=STATUS_BY_KIND[ErrorKind.UNHANDLED],
        message="Internal server error",
        details=request_description(request),
    )
    return JSONResponse(status_code=body.statusCode, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RewardsError, rewards_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
