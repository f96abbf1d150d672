"""Import all models here, if needed for Alembic migration."""
from .base import Base

from .account_type import AccountType
from .department import Department
from .grade import Grade
from .semester import Semester, CurrentSemester, NextSemester
from .instructor import Instructor
from .course import Course
from .class_model import ClassModel
from .student import Student

# This ensures all models are loaded when importing models
