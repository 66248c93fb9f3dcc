"""Helpers for the JSON response envelope.

Every API response carries ``success``, ``data``, ``message`` and ``error``.
``message`` is the operator-facing text (success or failure).
"""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200, message: str | None = None) -> Response:
    """Success response."""

    return jsonify({"success": True, "data": data, "message": message, "error": None}), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> Response:
    """Error response. The error message doubles as the top-level message."""

    return (
        jsonify(
            {
                "success": False,
                "data": None,
                "message": message,
                "error": {"code": code, "message": message, "details": details},
            }
        ),
        status_code,
    )
