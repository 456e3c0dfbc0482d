# monitoring/views.py
"""
Views for the monitoring application.

This module serves the HTML application journal to staff
members through the API.
"""

from pathlib import Path

from django.conf import settings
from django.http import HttpResponse
from rest_framework.views import APIView

from robospark.api import IsAdmin


class LogsView(APIView):
    """
    Handler for GET /api/admin/logs

    Returns the HTML journal written by
    :class:`monitoring.handlers.HtmlLogHandler`, or a placeholder
    page when nothing has been logged yet.
    """

    permission_classes = (IsAdmin,)

    def get(self, request):
        log_file = Path(settings.LOG_FILE)

        # Read the log file if available, otherwise fallback with a placeholder
        if log_file.exists():
            html = log_file.read_text(encoding="utf-8")
        else:
            html = "<p>No logs yet.</p>"
        return HttpResponse(html, content_type="text/html; charset=utf-8")
