"""
JSON response and request-body helpers for the public API.
"""

import json
from typing import Any, TypeVar

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from apps.web.core.serializers import ValidationErrorDetail, ValidationErrorResponse

_S = TypeVar("_S", bound=BaseModel)


class RequestBodyError(Exception):
    """Request body could not be parsed; carries the 400 response to return."""

    def __init__(self, response: JsonResponse) -> None:
        super().__init__("Invalid request body")
        self.response = response


def _cors_headers() -> dict[str, str]:
    """CORS headers for the admin frontend."""
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def json_response(data: Any, status: int = 200) -> JsonResponse:
    """Create a JSON response with CORS headers."""
    response = JsonResponse(data, status=status, safe=isinstance(data, dict))
    for key, value in _cors_headers().items():
        response[key] = value
    return response


def empty_response(status: int = 204) -> HttpResponse:
    """Create an empty-bodied response with CORS headers."""
    response = HttpResponse(status=status)
    for key, value in _cors_headers().items():
        response[key] = value
    return response


def validation_error_response(error: PydanticValidationError) -> JsonResponse:
    """Render pydantic errors as a 400 ValidationErrorResponse."""
    details = [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in err["loc"]),
            message=err["msg"],
        )
        for err in error.errors()
    ]
    response = ValidationErrorResponse(error="validation_error", details=details)
    return json_response(response.model_dump(), status=400)


def parse_body(request: HttpRequest, schema: type[_S]) -> _S:
    """
    Parse and validate a JSON request body against a schema.

    Raises:
        RequestBodyError: If the body is not JSON or fails validation.
    """
    try:
        body = json.loads(request.body or b"{}")
    except json.JSONDecodeError as e:
        raise RequestBodyError(
            json_response({"error": "Invalid JSON in request body"}, status=400)
        ) from e

    try:
        return schema.model_validate(body)
    except PydanticValidationError as e:
        raise RequestBodyError(validation_error_response(e)) from e
