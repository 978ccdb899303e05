"""
ASGI config for the Submission Desk service.

Served by uvicorn through ``manage.py serve``, which prepares storage first.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.prod")

application = get_asgi_application()
