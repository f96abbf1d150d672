from .base_service import BaseService
from .account_type_service import AccountTypeService
from .department_service import DepartmentService
from .grade_service import GradeService
from .semester_service import SemesterService
from .instructor_service import InstructorService
from .course_service import CourseService
from .class_service import ClassService
from .student_service import StudentService
from .temporal_guard import TemporalGuard
from .administrator import Administrator

__all__ = [
    "BaseService",
    "AccountTypeService",
    "DepartmentService",
    "GradeService",
    "SemesterService",
    "InstructorService",
    "CourseService",
    "ClassService",
    "StudentService",
    "TemporalGuard",
    "Administrator",
]
