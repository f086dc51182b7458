# doctors_portal/core/errors.py
"""
Error taxonomy and the FastAPI handlers that render it.

Gate failures keep their HTTP status (401/403) with a ``{"message": ...}``
body. Store and gateway failures are reported in-payload as
``{"success": false, "error": ...}`` with a 200 status.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class GateError(Exception):
    """Base for identity and role gate failures."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Forbidden Access"):
        super().__init__(message)
        self.message = message


class AuthenticationMissing(GateError):
    """No Authorization header on a guarded route."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized Access"):
        super().__init__(message)


class AuthenticationInvalid(GateError):
    """Bearer token is malformed, badly signed or expired."""


class AuthorizationDenied(GateError):
    """Caller is authenticated but not allowed to touch the resource."""


class UpstreamFailure(Exception):
    """A store or payment gateway call failed."""


class InvalidIdentifier(UpstreamFailure, ValueError):
    """A document id string could not be parsed."""


class PaymentGatewayError(UpstreamFailure):
    pass


def error_payload(message: str) -> dict:
    return {"success": False, "error": message}


async def gate_exception_handler(request: Request, exc: GateError) -> JSONResponse:
    logger.info("%s %s denied: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def upstream_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_200_OK, content=error_payload(str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GateError, gate_exception_handler)
    app.add_exception_handler(UpstreamFailure, upstream_exception_handler)
    app.add_exception_handler(SQLAlchemyError, upstream_exception_handler)
