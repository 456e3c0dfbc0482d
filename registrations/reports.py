# registrations/reports.py
"""
Figures shown on the back-office dashboard.
"""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db.models import Count, Q, Sum
from django.db.models.functions import TruncMonth
from django.utils import timezone

from courses.models import Course

from .models import Registration

User = get_user_model()

RECENT_REGISTRATIONS = 10
REVENUE_MONTHS = 6


def _money(value) -> str:
    return f"{(value or Decimal('0')):.2f}"


def _month_starts(today, count: int) -> list:
    """First day of the ``count`` months ending with the month of ``today``, oldest first."""
    months = []
    year, month = today.year, today.month
    for _ in range(count):
        months.append(today.replace(year=year, month=month, day=1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(months))


def revenue_by_month(today=None, months: int = REVENUE_MONTHS) -> list:
    """
    Completed revenue per calendar month.

    Parameters
    ----------
    today : date, optional
        Last month covered; defaults to the current local date.
    months : int
        Number of months reported, months without sales included.

    Returns
    -------
    list of dict
        ``{"month": "October 2026", "amount": "250.00"}`` entries,
        oldest month first.
    """
    today = today or timezone.localdate()
    starts = _month_starts(today, months)
    totals = (
        Registration.objects.filter(
            payment_status=Registration.PaymentStatus.COMPLETED,
            created_at__date__gte=starts[0],
        )
        .annotate(month=TruncMonth("created_at"))
        .values("month")
        .annotate(amount=Sum("amount_paid"))
        .order_by()
    )
    by_month = {}
    for row in totals:
        month = row["month"]
        if hasattr(month, "date"):
            month = month.date()
        by_month[month] = row["amount"]
    return [{"month": f"{start:%B %Y}", "amount": _money(by_month.get(start))} for start in starts]


def dashboard_stats(now=None) -> dict:
    """
    Compute the dashboard figures.

    Users are counted without staff accounts. Revenue only counts
    completed registrations; enrollments leave out refunded ones.

    Returns
    -------
    dict
        Ready-to-serialize mapping with camelCase keys.
    """
    now = now or timezone.now()
    today = timezone.localdate(now)
    week_ago = now - timedelta(days=7)
    month_start = today.replace(day=1)

    customers = User.objects.filter(is_staff=False)
    completed = Registration.objects.filter(payment_status=Registration.PaymentStatus.COMPLETED)

    enrollments = Course.objects.annotate(
        count=Count("registrations", filter=~Q(registrations__payment_status="refunded"))
    ).order_by("title")

    recent = Registration.objects.select_related("course", "user").order_by("-created_at")[
        :RECENT_REGISTRATIONS
    ]

    return {
        "totalUsers": customers.count(),
        "newUsersThisWeek": customers.filter(date_joined__gte=week_ago).count(),
        "totalCourses": Course.objects.count(),
        "activeCourses": Course.objects.filter(end_date__gte=today).count(),
        "totalRegistrations": Registration.objects.count(),
        "newRegistrationsThisWeek": Registration.objects.filter(created_at__gte=week_ago).count(),
        "totalRevenue": _money(completed.aggregate(total=Sum("amount_paid"))["total"]),
        "revenueThisMonth": _money(
            completed.filter(created_at__date__gte=month_start).aggregate(total=Sum("amount_paid"))[
                "total"
            ]
        ),
        "enrollmentsByCourse": [
            {"courseId": course.pk, "courseName": course.title, "count": course.count}
            for course in enrollments
        ],
        "revenueByMonth": revenue_by_month(today),
        "recentRegistrations": [
            {
                "id": registration.pk,
                "date": registration.created_at,
                "studentName": registration.child_name,
                "courseName": registration.course.title,
                "parentName": registration.user.get_full_name(),
                "amount": _money(registration.amount_paid),
                "status": registration.payment_status,
            }
            for registration in recent
        ],
    }
