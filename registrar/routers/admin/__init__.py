from . import catalog, semesters, instructors, courses, classes, students

__all__ = [
    "catalog",
    "semesters",
    "instructors",
    "courses",
    "classes",
    "students",
]
