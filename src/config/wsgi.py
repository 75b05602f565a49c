"""WSGI entry point.

The store connection is probed once here so an unreachable database is
reported at boot; the process keeps serving either way.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.database import connect_db  # noqa: E402

connect_db()
