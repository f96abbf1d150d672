# registrar/services/class_service.py
from typing import Optional

from sqlalchemy import and_, select

from .base_service import BaseService
from ..core.executor import QueryExecutor
from ..models.class_model import ClassModel
from ..schemas.results import ListResult, OperationResult


class ClassService(BaseService[ClassModel]):
    """Class rows. Semester rules are enforced by the caller, see TemporalGuard."""

    def __init__(self, executor: QueryExecutor):
        super().__init__(ClassModel, executor)

    def _identity(self, course_id: int, section: str, year: int, semester: str):
        c = self.table.c
        return and_(
            c.course_id == course_id,
            c.section == section,
            c.year == year,
            c.semester == semester,
        )

    async def create_class(
        self,
        class_id: Optional[int],
        course_id: int,
        section: str,
        instructor: Optional[int],
        year: int,
        semester: str
    ) -> OperationResult:
        """Create a class; without a class_id the store assigns one"""
        values = {
            "course_id": course_id,
            "section": section,
            "instructor": instructor,
            "year": year,
            "semester": semester,
        }
        if class_id is not None:
            values["id"] = class_id
        return await self.create(values)

    async def get_classes(self) -> ListResult:
        return await self.get_multi()

    async def get_class_info(self, course_id: int, section: str, year: int, semester: str) -> ListResult:
        stmt = select(self.table).where(self._identity(course_id, section, year, semester))
        result = await self.executor.execute(stmt)
        if not result.ok:
            return OperationResult.fail()
        return result.rows

    async def get_by_semester(self, year: int, semester: str) -> ListResult:
        """Classes taking place in the given semester"""
        c = self.table.c
        stmt = select(self.table).where(c.year == year, c.semester == semester)
        result = await self.executor.execute(stmt)
        if not result.ok:
            return OperationResult.fail()
        return result.rows

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
        return await self.update_where(
            {
                "section": new_section,
                "instructor": new_instructor,
                "year": new_year,
                "semester": new_semester,
            },
            self._identity(course_id, curr_section, curr_year, curr_semester),
        )

    async def delete_class(self, course_id: int, section: str, year: int, semester: str) -> OperationResult:
        return await self.delete_where(self._identity(course_id, section, year, semester))
