"""Core app views."""

import logging

from django.http import HttpRequest, JsonResponse

logger = logging.getLogger(__name__)


def not_found(request: HttpRequest, exception: Exception | None = None) -> JsonResponse:
    """JSON 404 so every API response carries a ``success`` flag."""
    return JsonResponse({"success": False, "error": "Not found"}, status=404)


def server_error(request: HttpRequest) -> JsonResponse:
    """JSON 500 without internal detail."""
    logger.error("Unhandled error on %s %s", request.method, request.path)
    return JsonResponse({"success": False, "error": "Server error"}, status=500)


def bad_request(request: HttpRequest, exception: Exception | None = None) -> JsonResponse:
    """JSON 400 for requests rejected before reaching a view."""
    return JsonResponse({"success": False, "error": "Bad request"}, status=400)
