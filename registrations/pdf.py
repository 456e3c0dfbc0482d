# registrations/pdf.py
"""
PDF generation utilities for the registrations application.

This module renders registration receipts with ReportLab. The
receipt lists the confirmation number, the account holder, the
child, the course dates and the amount paid.
"""

from io import BytesIO

from django.utils.timezone import localtime
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas


def render_receipt_pdf(registration) -> bytes:
    """
    Render the receipt of a registration.

    Parameters
    ----------
    registration : Registration
        The registration, with ``course``, ``user`` and
        ``discount_code`` available.

    Returns
    -------
    bytes
        The PDF document.

    Notes
    -----
    - Uses ReportLab for PDF generation, US Letter page size.
    - Refunded registrations are marked as such under the amount.
    """
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=LETTER)
    width, height = LETTER
    margin = 20 * mm
    y = height - margin

    # --- Header section ---
    c.setFont("Helvetica-Bold", 16)
    c.drawString(margin, y, f"RoboSpark receipt {registration.confirmation_number}")
    y -= 12 * mm
    c.setFont("Helvetica", 11)
    c.drawString(margin, y, f"Date: {localtime(registration.created_at).strftime('%Y-%m-%d %H:%M')}")
    y -= 8 * mm

    # --- Account holder and child ---
    user = registration.user
    c.drawString(margin, y, f"Billed to: {user.get_full_name() or user.email} ({user.email or 'n/a'})")
    y -= 8 * mm
    c.drawString(margin, y, f"Student: {registration.child_name}")
    y -= 8 * mm

    # --- Course and amount details ---
    course = registration.course
    c.setFont("Helvetica-Bold", 12)
    c.drawString(margin, y, "Details:")
    y -= 8 * mm
    c.setFont("Helvetica", 11)
    c.drawString(margin, y, f"Course: {course.title}")
    y -= 8 * mm
    c.drawString(margin, y, f"Dates: {course.start_date:%Y-%m-%d} to {course.end_date:%Y-%m-%d}")
    y -= 8 * mm
    if registration.discount_code_id:
        c.drawString(margin, y, f"Discount code: {registration.discount_code.code}")
        y -= 8 * mm
    c.drawString(margin, y, f"Amount paid: ${registration.amount_paid}")
    y -= 8 * mm
    c.drawString(margin, y, f"Status: {registration.get_payment_status_display()}")

    # --- Footer ---
    c.setFont("Helvetica-Oblique", 10)
    c.drawString(margin, 15 * mm, "Thank you for choosing RoboSpark.")
    c.showPage()
    c.save()
    return buffer.getvalue()
