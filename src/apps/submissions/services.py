"""Submissions app services."""

import logging

from django.conf import settings
from django.db import DatabaseError

from .exceptions import StorageError
from .models import UserSubmission

logger = logging.getLogger(__name__)


def clean_text(value) -> str:
    """Return a trimmed string; anything that is not a string counts as empty."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def clean_message(value) -> str | None:
    """Keep a string message as provided; empty, missing or non-string becomes ``None``."""
    if not isinstance(value, str) or not value:
        return None
    return value


async def create_submission(name: str, email: str, message: str | None = None) -> int:
    """Insert one submission and return its id.

    ``name`` and ``email`` must already be validated and trimmed.
    """
    try:
        submission = await UserSubmission.objects.acreate(
            name=name,
            email=email,
            message=message,
        )
    except DatabaseError as exc:
        logger.exception("DB insert error")
        raise StorageError("DB error") from exc

    logger.info("Stored submission #%d", submission.pk)
    return submission.pk


async def list_recent_submissions(limit: int | None = None) -> list[dict]:
    """Return the newest submissions, capped at ``SUBMISSIONS_LIST_LIMIT``."""
    cap = settings.SUBMISSIONS_LIST_LIMIT
    limit = cap if limit is None else min(limit, cap)

    try:
        qs = UserSubmission.objects.order_by("-created_at", "-id")[:limit]
        return [submission.to_dict() async for submission in qs]
    except DatabaseError as exc:
        logger.exception("DB query error")
        raise StorageError("DB error") from exc
