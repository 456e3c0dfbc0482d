# robospark/wsgi.py
"""
WSGI config for the RoboSpark API.

This module exposes the WSGI callable as a module-level variable
named ``application``, picked up by Gunicorn, uWSGI or Django's
``runserver``.

For more details, see:
https://docs.djangoproject.com/en/stable/howto/deployment/wsgi/
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "robospark.settings")

#: The WSGI application callable used by WSGI servers
application = get_wsgi_application()
