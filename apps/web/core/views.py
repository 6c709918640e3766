"""
Core API views.
"""

from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from apps.web.core.decorators import json_api
from apps.web.core.responses import json_response
from apps.web.core.serializers import ClockResponse


@json_api(["GET"])
def clock(_request: HttpRequest) -> JsonResponse:
    """
    GET /api/clock

    Returns the server time, used by the admin console to align
    event-log timestamps with the backend clock.
    """
    now = timezone.now()
    response = ClockResponse(
        time=now.isoformat(),
        timestamp=int(now.timestamp() * 1000),
    )
    return json_response(response.model_dump())
