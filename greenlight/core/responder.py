"""Turns every failure into an ``{"error": ...}`` response.

Handlers never write error responses themselves; they raise and the handlers
registered here pick the status code and message.
"""

from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from greenlight.core.container import AppContainer
from greenlight.core.errors import APIError, BadRequestError, FailedValidationError, JSONEncodeError, NotFoundError
from greenlight.core.jsonio import write_json
from greenlight.core.logging import request_fields
from greenlight.models.envelope import ErrorEnvelope

SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"
NOT_FOUND_MESSAGE = "the requested resource could not be found"


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def log_error(request: Request, exc: BaseException) -> None:
    _container(request).logger.error(
        str(exc) or exc.__class__.__name__,
        extra={**request_fields(request), "error_type": exc.__class__.__name__},
        exc_info=(type(exc), exc, exc.__traceback__),
    )


def error_response(
    request: Request, status: int, message: Any, headers: Mapping[str, str] | None = None
) -> Response:
    try:
        return write_json(status, ErrorEnvelope(error=message), headers)
    except (JSONEncodeError, ValueError) as exc:
        # pydantic's ValidationError is a ValueError too
        log_error(request, exc)
        return Response(status_code=500)


def server_error_response(request: Request, exc: BaseException) -> Response:
    log_error(request, exc)
    return error_response(request, 500, SERVER_ERROR_MESSAGE)


def not_found_response(request: Request) -> Response:
    return error_response(request, 404, NOT_FOUND_MESSAGE)


def method_not_allowed_response(request: Request, headers: Mapping[str, str] | None = None) -> Response:
    message = f"the {request.method} method is not supported for this resource."
    return error_response(request, 405, message, headers)


def bad_request_response(request: Request, exc: APIError) -> Response:
    return error_response(request, 400, exc.message, exc.headers)


def failed_validation_response(request: Request, errors: dict[str, str]) -> Response:
    return error_response(request, 422, errors)


async def api_error_handler(request: Request, exc: APIError) -> Response:
    if isinstance(exc, NotFoundError):
        return not_found_response(request)
    if isinstance(exc, FailedValidationError):
        return failed_validation_response(request, exc.errors)
    if isinstance(exc, BadRequestError):
        return bad_request_response(request, exc)
    return error_response(request, exc.status_code, exc.message, exc.headers)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404:
        return not_found_response(request)
    if exc.status_code == 405:
        return method_not_allowed_response(request, exc.headers)
    return error_response(request, exc.status_code, exc.detail, exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> Response:
    return server_error_response(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
