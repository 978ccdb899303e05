"""Prepare storage and serve the ASGI application with uvicorn.

``manage.py`` defaults to development settings, where Django renders its HTML
debug pages instead of the JSON error handlers. Production runs use::

    DJANGO_SETTINGS_MODULE=config.settings.prod python src/manage.py serve
"""

import logging

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.submissions.exceptions import StorageInitError
from apps.submissions.storage import initialize_storage

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = (
        "Initialize the submissions store, then serve HTTP requests. "
        "Set DJANGO_SETTINGS_MODULE=config.settings.prod for production."
    )

    def add_arguments(self, parser) -> None:
        parser.add_argument("--host", default=None, help="Bind address (default: HOST setting).")
        parser.add_argument("--port", type=int, default=None, help="Listening port (default: PORT setting).")

    def handle(self, *args, **options) -> None:
        host = settings.HOST if options["host"] is None else options["host"]
        port = settings.PORT if options["port"] is None else options["port"]

        if settings.DEBUG:
            logger.warning(
                "DEBUG is on: error responses are HTML debug pages. "
                "Use DJANGO_SETTINGS_MODULE=config.settings.prod in production."
            )

        try:
            initialize_storage()
        except StorageInitError as exc:
            logger.error("Storage initialization failed: %s", exc)
            raise CommandError(str(exc), returncode=1) from exc

        from config.asgi import application

        logger.info("Server listening on http://localhost:%d", port)
        uvicorn.run(application, host=host, port=port, log_level=settings.LOG_LEVEL.lower())
