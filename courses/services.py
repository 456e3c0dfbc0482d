# courses/services.py
"""
Catalogue queries and back-office writes for courses and instructors.
"""

import logging

from django.db import transaction
from django.db.models import Count, Q

from .exceptions import CourseInUse, CourseNotFound, InstructorInUse, InstructorNotFound
from .models import Course, Instructor

logger = logging.getLogger(__name__)

SORT_ORDERS = {
    "price-low": ("price", "title"),
    "price-high": ("-price", "title"),
    "date": ("start_date", "title"),
}


def courses_with_enrollment():
    """
    Return a course queryset annotated with ``enrolled_count``.

    Refunded registrations do not count as enrolled.
    """
    return Course.objects.select_related("instructor").annotate(
        enrolled_count=Count(
            "registrations",
            filter=~Q(registrations__payment_status="refunded"),
        )
    )


def filter_courses(queryset, *, search=None, age=None, skill_level=None, featured=None, sort=None):
    """
    Apply the public catalogue filters.

    Parameters
    ----------
    queryset : QuerySet
        Base course queryset.
    search : str, optional
        Case-insensitive match on title or description.
    age : int, optional
        Keep courses whose age window contains this age.
    skill_level : str, optional
        Exact skill level.
    featured : bool, optional
        Keep featured (or non-featured) courses only.
    sort : str, optional
        One of ``price-low``, ``price-high`` or ``date``; unknown values
        keep the default ordering.

    Returns
    -------
    QuerySet
        The filtered queryset.
    """
    if search:
        queryset = queryset.filter(Q(title__icontains=search) | Q(description__icontains=search))
    if age is not None:
        queryset = queryset.filter(min_age__lte=age, max_age__gte=age)
    if skill_level:
        queryset = queryset.filter(skill_level=skill_level)
    if featured is not None:
        queryset = queryset.filter(featured=featured)
    if sort in SORT_ORDERS:
        queryset = queryset.order_by(*SORT_ORDERS[sort])
    return queryset


def get_course(course_id):
    try:
        return courses_with_enrollment().get(pk=course_id)
    except (Course.DoesNotExist, ValueError):
        raise CourseNotFound()


@transaction.atomic
def delete_course(course: Course) -> None:
    """
    Delete a course nobody registered to.

    Raises
    ------
    CourseInUse
        If any registration, refunded ones included, references it.
    """
    if course.registrations.exists():
        raise CourseInUse()
    course_id = course.pk
    course.delete()
    logger.info("Course deleted course=%s", course_id)


def instructors_with_course_count():
    return Instructor.objects.annotate(course_count=Count("courses"))


def get_instructor(instructor_id):
    try:
        return instructors_with_course_count().get(pk=instructor_id)
    except (Instructor.DoesNotExist, ValueError):
        raise InstructorNotFound()


@transaction.atomic
def delete_instructor(instructor: Instructor) -> None:
    if instructor.courses.exists():
        raise InstructorInUse()
    instructor_id = instructor.pk
    instructor.delete()
    logger.info("Instructor deleted instructor=%s", instructor_id)
