from . import health
from .admin import catalog, semesters, instructors, courses, classes, students

__all__ = [
    "health",
    "catalog",
    "semesters",
    "instructors",
    "courses",
    "classes",
    "students",
]
