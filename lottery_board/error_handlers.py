"""Centralized error handlers for the JSON API.

Browser form posts handle ``AppError`` themselves and re-render the board;
anything reaching these handlers is answered with the JSON envelope.
"""

from __future__ import annotations

import logging

from flask import Flask
from marshmallow import ValidationError as MarshmallowValidationError
from werkzeug.exceptions import HTTPException

from lottery_board.errors import AppError, EntryRejectedError, StorageError, ValidationError
from lottery_board.utils.responses import fail

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(EntryRejectedError)
    def _handle_rejected_entry(exc: EntryRejectedError):
        # Operator mistakes: the message is the whole contract, no error-level log.
        return fail(exc.code, exc.message, exc.status_code, {"tier": exc.tier})

    @app.errorhandler(StorageError)
    def _handle_storage_error(exc: StorageError):
        logger.error("Results storage failure: %s", exc.message)
        return fail(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return fail(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(MarshmallowValidationError)
    def _handle_schema_error(exc: MarshmallowValidationError):
        wrapped = ValidationError(message="Invalid request body", details=exc.messages)
        return fail(wrapped.code, wrapped.message, wrapped.status_code, wrapped.details)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("not_found", "Not found", 404)
        if status == 405:
            return fail("method_not_allowed", "Method not allowed", 405)

        return fail("http_error", exc.description or "HTTP error", status, details={"name": exc.name})

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return fail("internal_error", "Internal server error", 500)
