# courses/models.py
"""
Database models for the courses application.

This module defines the Instructor and Course models. Courses are
the robotics programmes families register their children to; each
may be taught by one instructor.
"""

from django.core.exceptions import ValidationError
from django.db import models


class Instructor(models.Model):
    """
    Model representing an instructor.

    Attributes
    ----------
    name : CharField
        Display name of the instructor.
    bio : TextField
        Optional biography.
    image_url : CharField
        Optional portrait URL.
    created_at : DateTimeField
        Creation timestamp.
    """

    name = models.CharField("Name", max_length=200)
    bio = models.TextField("Bio", blank=True)
    image_url = models.CharField("Image URL", max_length=500, blank=True)
    created_at = models.DateTimeField("Created at", auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Course(models.Model):
    """
    Model representing a course.

    Attributes
    ----------
    title : CharField
        Title of the course.
    description, long_description : TextField
        Short catalogue text and full description.
    min_age, max_age : PositiveSmallIntegerField
        Inclusive age window of the children admitted.
    skill_level : CharField
        One of :class:`Course.SkillLevel`.
    topics, days : JSONField
        Lists of topic names and weekday names.
    duration, time_slot : CharField
        Free-text schedule information.
    start_date, end_date : DateField
        First and last day of the course.
    price : DecimalField
        Regular price in dollars.
    discounted_price : DecimalField
        Optional sale price; when set it replaces ``price``.
    capacity : PositiveIntegerField
        Maximum number of completed or pending registrations.
    instructor : ForeignKey
        Optional instructor teaching the course.
    image_url : CharField
        Optional illustration URL.
    featured : BooleanField
        Whether the course is highlighted in the catalogue.
    """

    class SkillLevel(models.TextChoices):
        BEGINNER = "Beginner", "Beginner"
        INTERMEDIATE = "Intermediate", "Intermediate"
        ADVANCED = "Advanced", "Advanced"

    title = models.CharField("Title", max_length=200)
    description = models.TextField("Description")
    long_description = models.TextField("Long description", blank=True)
    min_age = models.PositiveSmallIntegerField("Minimum age")
    max_age = models.PositiveSmallIntegerField("Maximum age")
    skill_level = models.CharField(
        "Skill level",
        max_length=20,
        choices=SkillLevel.choices,
        default=SkillLevel.BEGINNER,
    )
    topics = models.JSONField("Topics", default=list, blank=True)
    duration = models.CharField("Duration", max_length=100)
    start_date = models.DateField("Start date")
    end_date = models.DateField("End date")
    days = models.JSONField("Days", default=list, blank=True)
    time_slot = models.CharField("Time slot", max_length=100)
    price = models.DecimalField("Price ($)", max_digits=10, decimal_places=2)
    discounted_price = models.DecimalField(
        "Discounted price ($)", max_digits=10, decimal_places=2, null=True, blank=True
    )
    capacity = models.PositiveIntegerField("Capacity")
    instructor = models.ForeignKey(
        Instructor,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="courses",
        verbose_name="Instructor",
    )
    image_url = models.CharField("Image URL", max_length=500, blank=True)
    featured = models.BooleanField("Featured", default=False)
    created_at = models.DateTimeField("Created at", auto_now_add=True)
    updated_at = models.DateTimeField("Updated at", auto_now=True)

    class Meta:
        ordering = ["start_date", "title"]

    def __str__(self) -> str:
        return self.title

    def clean(self):
        """
        Validate the price and age windows.

        Raises
        ------
        ValidationError
            If ``min_age`` exceeds ``max_age`` or the discounted price
            exceeds the regular price.
        """
        errors = {}
        if self.min_age is not None and self.max_age is not None and self.min_age > self.max_age:
            errors["max_age"] = "Maximum age must be greater than or equal to minimum age."
        if (
            self.discounted_price is not None
            and self.price is not None
            and self.discounted_price > self.price
        ):
            errors["discounted_price"] = "Discounted price cannot exceed the regular price."
        if self.start_date and self.end_date and self.start_date > self.end_date:
            errors["end_date"] = "End date must not be before start date."
        if errors:
            raise ValidationError(errors)

    @property
    def effective_price(self):
        """Price charged before any discount code."""
        return self.discounted_price if self.discounted_price is not None else self.price
