"""Turns exceptions that escape the routes into ErrorResponse bodies."""

import logging
from typing import Any, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError as PostgrestAPIError

from src.schemas.common import ErrorResponse
from src.services.user_store import UserNotFoundError

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def error_handler_middleware(request: Request, call_next: Callable[[Request], Any]) -> Response:
    """Map user store errors and unexpected exceptions to JSON bodies.

    Profile updates report their own failures, so only reads such as
    GET /profiles/me let store errors reach this layer. A missing row
    answers 404, a PostgREST rejection 502, anything else 500 with the
    stack trace logged.
    """
    try:
        return await call_next(request)

    except UserNotFoundError as e:
        logger.warning("No user record %s for %s %s", e.user_id, request.method, request.url.path)
        return error_response(status.HTTP_404_NOT_FOUND, "not_found", "Profile not found")

    except PostgrestAPIError as e:
        logger.error(
            "User store rejected %s %s: %s (code %s)",
            request.method,
            request.url.path,
            e.message,
            e.code,
        )
        return error_response(status.HTTP_502_BAD_GATEWAY, "store_error", "User store request failed")

    except Exception:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "An unexpected error occurred",
        )
