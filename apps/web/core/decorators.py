"""
Decorators for request handling and validation.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.http import HttpRequest, HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.web.core.exceptions import ServiceError
from apps.web.core.responses import RequestBodyError, empty_response, json_response

logger = logging.getLogger(__name__)


def json_api(methods: list[str]) -> Callable[..., Any]:
    """
    Decorator for JSON API views.

    - Restricts the view to the given HTTP methods (OPTIONS is always allowed
      and answered with a CORS preflight response)
    - Converts request-body errors to their prepared 400 response
    - Converts ServiceError subclasses to {"error": message} with the
      exception's status code

    Usage:
        @json_api(["GET", "POST"])
        def menu_items(request):
            ...
    """

    def decorator(view_func: Callable[..., HttpResponse]) -> Callable[..., Any]:
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
            if request.method == "OPTIONS":
                return empty_response(status=200)

            try:
                return view_func(request, *args, **kwargs)
            except RequestBodyError as e:
                return e.response
            except ServiceError as e:
                logger.warning(
                    "%s %s rejected (%d): %s",
                    request.method,
                    request.path,
                    e.status_code,
                    e.message,
                )
                return json_response({"error": e.message}, status=e.status_code)

        return csrf_exempt(require_http_methods([*methods, "OPTIONS"])(wrapper))

    return decorator
