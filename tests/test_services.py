"""Tests for the submissions service layer."""

from unittest.mock import patch

import pytest
from django.db import OperationalError

from apps.submissions import services
from apps.submissions.exceptions import StorageError
from apps.submissions.models import UserSubmission


class TestCleaning:
    """Field normalization helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            ("", ""),
            ("  Alice  ", "Alice"),
            (42, ""),
            (["x"], ""),
            (True, ""),
        ],
    )
    def test_clean_text(self, value, expected: str) -> None:
        """Strings are trimmed; None and non-string values become empty."""
        assert services.clean_text(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            ("", None),
            (" hello ", " hello "),
            ({"a": 1}, None),
            (7, None),
        ],
    )
    def test_clean_message(self, value, expected) -> None:
        """Empty or non-string messages become the absence marker, strings are kept as-is."""
        assert services.clean_message(value) == expected


@pytest.mark.django_db(transaction=True)
class TestCreateSubmission:
    """Async insert path."""

    @pytest.mark.asyncio
    async def test_returns_new_id(self) -> None:
        """The stored row's id is returned."""
        submission_id = await services.create_submission("Alice", "a@x.com")
        stored = await UserSubmission.objects.aget(pk=submission_id)
        assert stored.name == "Alice"
        assert stored.message is None
        assert stored.created_at is not None

    @pytest.mark.asyncio
    async def test_ids_increase(self) -> None:
        """Each insert receives a larger id than the previous one."""
        first = await services.create_submission("A", "a@x.com")
        second = await services.create_submission("B", "b@x.com", "hi")
        assert second > first

    @pytest.mark.asyncio
    async def test_database_error_wrapped(self) -> None:
        """Driver errors surface as StorageError."""
        with (
            patch.object(UserSubmission.objects, "acreate", side_effect=OperationalError("locked")),
            pytest.raises(StorageError),
        ):
            await services.create_submission("Alice", "a@x.com")
        assert await UserSubmission.objects.acount() == 0


@pytest.mark.django_db(transaction=True)
class TestListRecentSubmissions:
    """Async listing path."""

    @pytest.mark.asyncio
    async def test_newest_first(self) -> None:
        """Most recent insert comes first."""
        for name in ("A", "B", "C"):
            await services.create_submission(name, f"{name}@x.com")
        users = await services.list_recent_submissions()
        assert [u["name"] for u in users] == ["C", "B", "A"]

    @pytest.mark.asyncio
    async def test_limit_cannot_exceed_cap(self, settings) -> None:
        """A larger explicit limit is still capped by the setting."""
        settings.SUBMISSIONS_LIST_LIMIT = 2
        for name in ("A", "B", "C"):
            await services.create_submission(name, f"{name}@x.com")
        users = await services.list_recent_submissions(limit=10)
        assert [u["name"] for u in users] == ["C", "B"]

    @pytest.mark.asyncio
    async def test_database_error_wrapped(self) -> None:
        """Query failures surface as StorageError."""
        with (
            patch.object(UserSubmission.objects, "order_by", side_effect=OperationalError("no such table")),
            pytest.raises(StorageError),
        ):
            await services.list_recent_submissions()
