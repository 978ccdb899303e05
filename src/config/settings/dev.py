"""
Django development settings for the Submission Desk service.
"""

from .base import *  # noqa: F403
from .base import LOGGING

DEBUG = True

ALLOWED_HOSTS = ["*"]

SECRET_KEY = "django-insecure-dev-key-do-not-use-in-production"  # noqa: S105

# Use simple static files storage in development
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

# Verbose app logging while developing
LOGGING["loggers"]["apps"]["level"] = "DEBUG"
