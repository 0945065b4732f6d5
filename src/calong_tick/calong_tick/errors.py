from __future__ import annotations

import logging

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from .common.http import fail
from .core.exceptions import (
    AllocationExhaustedError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first; the first isinstance match wins.
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (ConflictError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (AllocationExhaustedError, 503),
)


def status_for(err: DomainError) -> int:
    for kind, status in STATUS_BY_ERROR:
        if isinstance(err, kind):
            return status
    return 500


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(err: DomainError):
        status = status_for(err)
        if status == 401:
            logger.warning("%s %s rejected: %s", request.method, request.path, err)
        return fail(str(err), status)

    @app.errorhandler(404)
    def handle_not_found(_err):
        return fail("Endpoint not found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(_err):
        return fail("Method not allowed", 405)

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        if isinstance(err, HTTPException):
            return fail(err.description or err.name, err.code or 500)
        logger.exception("Server error on %s %s", request.method, request.path)
        return fail("Internal server error", 500)
