import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tinylink.core.errors import ERROR_STATUS, ErrorKind, ServiceError
from tinylink.core.tracing import REQUEST_ID_HEADER, get_request_id

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def error_body(error: str, message: str) -> dict:
    return {"error": error, "message": message}


def error_response(error: ServiceError) -> JSONResponse:
    status_code, title = ERROR_STATUS[error.kind]
    return JSONResponse(status_code=status_code, content=error_body(title, error.message))


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "missing" and tuple(first.get("loc", ())) == ("body",):
        return "Request body is required"
    msg = first.get("msg", "Invalid request")
    if msg.startswith(_VALUE_ERROR_PREFIX):
        msg = msg[len(_VALUE_ERROR_PREFIX):]
    return msg


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = _validation_message(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content=error_body("Validation Error", message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    title = HTTPStatus(exc.status_code).phrase
    message = exc.detail
    if exc.status_code == 404 and message == title:
        message = f"Route {request.method} {request.url.path} not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(title, message),
        headers=getattr(exc, "headers", None),
    )


def make_global_exception_handler(expose_details: bool):
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        message = str(exc) if expose_details else "Something went wrong"
        response = error_response(ServiceError(ErrorKind.INTERNAL, message))
        request_id = get_request_id(request)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response
    return global_exception_handler


def register_exception_handlers(app: FastAPI, expose_details: bool):
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, make_global_exception_handler(expose_details))
