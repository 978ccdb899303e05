"""Submissions app models."""

from typing import ClassVar

from django.db import models


class UserSubmission(models.Model):
    """A contact-form submission stored in the ``users`` table."""

    name = models.TextField()
    email = models.TextField()
    message = models.TextField(null=True, blank=True)  # noqa: DJ001
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "users"
        ordering: ClassVar[list[str]] = ["-created_at", "-id"]
        verbose_name = "user submission"
        verbose_name_plural = "user submissions"

    def __str__(self) -> str:
        return f"{self.name} - {self.email}"

    def to_dict(self) -> dict:
        """Serialize the record for the JSON listing."""
        return {
            "id": self.pk,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
