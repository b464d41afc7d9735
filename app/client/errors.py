"""Client-side error type and message extraction from API responses."""

import json
from typing import Any, Optional

import httpx


class ApiError(Exception):
    """A failed API call, ready to show to the user.

    Attributes:
        status: HTTP status, or None when no response was received.
        message: Human readable description.
    """

    def __init__(self, status: Optional[int], message: str):
        self.status = status
        self.message = message
        super().__init__(message)

    @property
    def title(self) -> str:
        return error_title(self.status)


def error_title(status: Optional[int]) -> str:
    if not status:
        return "Request failed"
    if status in (401, 403):
        return "Access denied"
    if status == 404:
        return "Company not found"
    if status >= 500:
        return "Server error"
    return "Request failed"


def format_validation_errors(data: Any) -> Optional[str]:
    """Render {"formErrors": [...], "fieldErrors": {...}} as one line.

    Returns:
        "msg | field: a, b" style text, or None if data holds no such detail.
    """
    if not isinstance(data, dict):
        return None

    form_errors = data.get("formErrors") if isinstance(data.get("formErrors"), list) else []
    field_errors = data.get("fieldErrors") if isinstance(data.get("fieldErrors"), dict) else {}

    lines = [error for error in form_errors if isinstance(error, str)]
    for field, errors in field_errors.items():
        if isinstance(errors, list) and errors:
            lines.append(f"{field}: {', '.join(str(error) for error in errors)}")
    return " | ".join(lines) if lines else None


def error_from_response(response: httpx.Response) -> ApiError:
    """Build an ApiError from a non-2xx response.

    Looks for structured validation detail, then "message", then "error".
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    raw_message: Any = None
    if isinstance(data, dict):
        raw_message = (
            format_validation_errors(data.get("error"))
            or format_validation_errors(data)
            or data.get("message")
            or data.get("error")
        )
    raw_message = raw_message or response.reason_phrase or "Request failed."
    message = raw_message if isinstance(raw_message, str) else json.dumps(raw_message)
    return ApiError(response.status_code, message)
