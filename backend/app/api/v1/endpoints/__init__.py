"""API endpoints package."""

from . import (
    courses,
    enrollments,
    resources,
    students,
)

__all__ = [
    "courses",
    "enrollments",
    "resources",
    "students",
]
