"""Pytest configuration for Submission Desk tests."""

import pytest

from apps.submissions.models import UserSubmission


@pytest.fixture
def make_submission(db):
    """Factory that stores a submission directly through the ORM."""

    def _make(name: str = "Alice", email: str = "a@x.com", message: str | None = None) -> UserSubmission:
        return UserSubmission.objects.create(name=name, email=email, message=message)

    return _make
