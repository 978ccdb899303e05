"""Submissions app views."""

import json
import logging

from django.core.exceptions import SuspiciousOperation
from django.http import HttpRequest, JsonResponse
from django.http.multipartparser import MultiPartParserError
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from . import services
from .exceptions import StorageError

logger = logging.getLogger(__name__)


class InvalidBody(ValueError):
    """The request body could not be decoded into an object."""


def parse_body(request: HttpRequest) -> dict:
    """Decode a JSON or form-encoded request body into a dict."""
    try:
        if request.content_type == "application/json":
            return _parse_json(request.body)
        return request.POST.dict()
    except (MultiPartParserError, SuspiciousOperation) as exc:
        raise InvalidBody("Invalid request body") from exc


def _parse_json(body: bytes) -> dict:
    if not body:
        return {}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidBody("Invalid JSON body") from exc
    if not isinstance(data, dict):
        raise InvalidBody("Invalid JSON body")
    return data


@method_decorator(csrf_exempt, name="dispatch")
class SubmitView(View):
    """Accept one contact-form submission."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        """Validate the body and store one record."""
        try:
            data = parse_body(request)
        except InvalidBody as exc:
            return JsonResponse({"success": False, "error": str(exc)}, status=400)

        name = services.clean_text(data.get("name"))
        email = services.clean_text(data.get("email"))
        if not name or not email:
            return JsonResponse({"success": False, "error": "Name and email required"}, status=400)

        message = services.clean_message(data.get("message"))

        try:
            submission_id = await services.create_submission(name, email, message)
        except StorageError:
            return JsonResponse({"success": False, "error": "DB error"}, status=500)

        return JsonResponse({"success": True, "id": submission_id})


class UserListView(View):
    """List the most recent submissions, newest first."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        try:
            users = await services.list_recent_submissions()
        except StorageError:
            return JsonResponse({"success": False, "error": "DB error"}, status=500)

        return JsonResponse({"success": True, "users": users})
