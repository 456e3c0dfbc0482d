# robospark/asgi.py
"""
ASGI config for the RoboSpark API.

Exposes the ASGI callable as ``application`` for Uvicorn,
Daphne or Hypercorn.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "robospark.settings")

#: The ASGI application callable used by ASGI servers
application = get_asgi_application()
