# registrar/services/administrator.py
"""Administrative façade: every administrator operation behind one object.

Writes resolve to an ``OperationResult``; reads resolve to a list of row
dicts, or to a bare failure (``detail`` is None) when the query errored.
Nothing here raises for store errors.
"""
from typing import Optional
import logging

from ..core.executor import QueryExecutor
from ..schemas.results import ListResult, OperationResult
from .account_type_service import AccountTypeService
from .class_service import ClassService
from .course_service import Cost, CourseService
from .department_service import DepartmentService
from .grade_service import GradeService
from .instructor_service import InstructorService
from .semester_service import ActiveEntry, SemesterService
from .student_service import StudentService
from .temporal_guard import TemporalGuard

logger = logging.getLogger(__name__)


class Administrator:
    def __init__(self, executor: QueryExecutor):
        self.executor = executor
        self.account_types = AccountTypeService(executor)
        self.departments = DepartmentService(executor)
        self.grades = GradeService(executor)
        self.semesters = SemesterService(executor)
        self.instructors = InstructorService(executor)
        self.courses = CourseService(executor)
        self.classes = ClassService(executor)
        self.students = StudentService(executor)
        self.guard = TemporalGuard(self.semesters)

    # Account types

    async def create_account_type(self, name: str) -> OperationResult:
        return await self.account_types.create_account_type(name)

    async def get_account_types(self) -> ListResult:
        return await self.account_types.get_account_types()

    async def delete_account_type(self, name: str) -> OperationResult:
        return await self.account_types.delete_account_type(name)

    # Departments

    async def create_department(self, id: Optional[int], name: str) -> OperationResult:
        return await self.departments.create_department(id, name)

    async def get_departments(self) -> ListResult:
        return await self.departments.get_departments()

    async def delete_department(self, id: int) -> OperationResult:
        return await self.departments.delete_department(id)

    # Grades

    async def create_grade(self, name: str) -> OperationResult:
        return await self.grades.create_grade(name)

    async def get_grades(self) -> ListResult:
        return await self.grades.get_grades()

    async def delete_grade(self, name: str) -> OperationResult:
        return await self.grades.delete_grade(name)

    # Semesters

    async def create_semester(self, name: str) -> OperationResult:
        return await self.semesters.create_semester(name)

    async def get_semesters(self) -> ListResult:
        return await self.semesters.get_semesters()

    async def delete_semester(self, name: str) -> OperationResult:
        return await self.semesters.delete_semester(name)

    async def get_current_semester(self) -> ActiveEntry:
        return await self.semesters.get_current_semester()

    async def get_next_semester(self) -> ActiveEntry:
        return await self.semesters.get_next_semester()

    async def assign_current_semester(self, name: str, year: int) -> OperationResult:
        """Make (name, year) the semester students enroll in now.

        Refused while (name, year) is the active next semester. To roll over,
        assign the new next semester first, then promote the old one to current.
        """
        verdict = await self.guard.check_current_candidate(name, year)
        if not verdict.success:
            logger.info("Refused current semester %s %s: %s", name, year, verdict.detail)
            return verdict
        return await self.semesters.append_current(name, year)

    async def assign_next_semester(self, name: str, year: int) -> OperationResult:
        """Make (name, year) the semester students may enroll in ahead of time"""
        verdict = await self.guard.check_next_candidate(name, year)
        if not verdict.success:
            logger.info("Refused next semester %s %s: %s", name, year, verdict.detail)
            return verdict
        return await self.semesters.append_next(name, year)

    # Instructors

    async def create_instructor(self, id: int, name: Optional[str], email: Optional[str]) -> OperationResult:
        return await self.instructors.create_instructor(id, name, email)

    async def get_instructors(self) -> ListResult:
        return await self.instructors.get_instructors()

    async def delete_instructor(self, id: int) -> OperationResult:
        return await self.instructors.delete_instructor(id)

    # Courses

    async def create_course(self, id: int, title: str, dept: int, credits: int, cost: Cost) -> OperationResult:
        return await self.courses.create_course(id, title, dept, credits, cost)

    async def view_courses(self) -> ListResult:
        return await self.courses.view_courses()

    async def update_course(
        self,
        id: int,
        new_title: str,
        new_dept: int,
        new_credits: int,
        new_cost: Cost
    ) -> OperationResult:
        return await self.courses.update_course(id, new_title, new_dept, new_credits, new_cost)

    async def delete_course(self, id: int) -> OperationResult:
        return await self.courses.delete_course(id)

    # Classes

    async def create_class(
        self,
        class_id: Optional[int],
        course_id: int,
        section: str,
        instructor: Optional[int],
        year: int,
        semester: str
    ) -> OperationResult:
        verdict = await self.guard.check_active_target(year, semester)
        if not verdict.success:
            return verdict
        return await self.classes.create_class(class_id, course_id, section, instructor, year, semester)

    async def get_classes(self) -> ListResult:
        return await self.classes.get_classes()

    async def get_class_info(self, course_id: int, section: str, year: int, semester: str) -> ListResult:
        return await self.classes.get_class_info(course_id, section, year, semester)

    async def get_current_classes(self) -> ListResult:
        return await self._classes_in(await self.semesters.get_current_semester())

    async def get_next_classes(self) -> ListResult:
        return await self._classes_in(await self.semesters.get_next_semester())

    async def _classes_in(self, entry: ActiveEntry) -> ListResult:
        if isinstance(entry, OperationResult):
            return entry
        if entry is None:
            return []
        return await self.classes.get_by_semester(entry["year"], entry["name"])

    async def update_class(
        self,
        course_id: int,
        curr_section: str,
        curr_year: int,
        curr_semester: str,
        new_section: str,
        new_instructor: Optional[int],
        new_year: int,
        new_semester: str
    ) -> OperationResult:
        # Only the destination semester is checked
        verdict = await self.guard.check_active_target(new_year, new_semester)
        if not verdict.success:
            return verdict
        return await self.classes.update_class(
            course_id, curr_section, curr_year, curr_semester,
            new_section, new_instructor, new_year, new_semester,
        )

    async def delete_class(self, course_id: int, section: str, year: int, semester: str) -> OperationResult:
        verdict = await self.guard.check_deletable(year, semester)
        if not verdict.success:
            return verdict
        return await self.classes.delete_class(course_id, section, year, semester)

    # Students

    async def create_student(self, id: int, name: str, ssn: int) -> OperationResult:
        return await self.students.create_student(id, name, ssn)

    async def get_students(self) -> ListResult:
        return await self.students.get_students()

    async def assign_graduation(self, id: int) -> OperationResult:
        return await self.students.assign_graduation(id)

    async def assign_probation(self, id: int) -> OperationResult:
        return await self.students.assign_probation(id)

    async def remove_probation(self, id: int) -> OperationResult:
        return await self.students.remove_probation(id)
