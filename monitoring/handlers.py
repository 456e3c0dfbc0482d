# monitoring/handlers.py
"""
HTML log handler for the monitoring application.

:class:`HtmlLogHandler` appends log records to an HTML file. The
generated file can be displayed directly in a browser and styled
with basic CSS: records are coloured by level (info, warn, error).
"""

import logging
from pathlib import Path

from django.utils.html import escape

# HTML header written when the log file is created
HEADER = """<!doctype html>
<html lang="en"><head><meta charset="utf-8"><title>Logs</title>
<style>
.log-info{ background:#e3f2fd; color:#0d47a1; padding:.5rem; border-left:4px solid #1976d2; margin:.25rem 0; }
.log-warn{ background:#fff8e1; color:#e65100; padding:.5rem; border-left:4px solid #ff9800; margin:.25rem 0; }
.log-error{ background:#ffebee; color:#b71c1c; padding:.5rem; border-left:4px solid #f44336; margin:.25rem 0; }
.code{ font-family:monospace; white-space:pre-wrap; }
</style></head><body>
<h3>Application logs</h3>
"""


def css_class(levelno: int) -> str:
    """
    Map a logging level to the CSS class of its HTML block.

    Parameters
    ----------
    levelno : int
        Numeric logging level.

    Returns
    -------
    str
        ``log-error``, ``log-warn`` or ``log-info``.
    """
    if levelno >= logging.ERROR:
        return "log-error"
    if levelno >= logging.WARNING:
        return "log-warn"
    return "log-info"


class HtmlLogHandler(logging.FileHandler):
    """
    Logging handler writing one HTML ``<div>`` per record.

    Parameters
    ----------
    filename : str
        Path of the HTML journal. Missing parent directories are
        created and a new file starts with :data:`HEADER`.

    Notes
    -----
    The file is never closed with a footer; browsers render the
    unterminated document fine and appending stays a plain write.
    """

    def __init__(self, filename, mode="a", encoding="utf-8", delay=False):
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists() or path.stat().st_size == 0:
            path.write_text(HEADER, encoding=encoding)
        super().__init__(str(path), mode=mode, encoding=encoding, delay=delay)
        self.setFormatter(
            logging.Formatter("%(asctime)s", datefmt="%Y-%m-%d %H:%M:%S")
        )

    def format(self, record) -> str:
        ts = self.formatter.formatTime(record, self.formatter.datefmt)
        label = "WARN" if record.levelname == "WARNING" else record.levelname
        message = escape(record.getMessage())
        block = (
            f'<div class="{css_class(record.levelno)}">'
            f"<strong>[{label} {ts}]</strong> {escape(record.name)}: {message}"
        )
        if record.exc_info:
            block += f'<pre class="code">{escape(self.formatter.formatException(record.exc_info))}</pre>'
        return block + "</div>"
