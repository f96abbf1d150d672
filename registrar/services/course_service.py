# registrar/services/course_service.py
from decimal import Decimal
from typing import Union

from .base_service import BaseService
from ..core.executor import QueryExecutor
from ..models.course import Course
from ..schemas.results import ListResult, OperationResult

Cost = Union[Decimal, float, int, str]


def _money(value: Cost):
    # floats like 1000.1 must not reach the NUMERIC column as binary fractions
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    return value


class CourseService(BaseService[Course]):
    def __init__(self, executor: QueryExecutor):
        super().__init__(Course, executor)

    async def create_course(self, id: int, title: str, dept: int, credits: int, cost: Cost) -> OperationResult:
        """Create a course. dept must reference an existing department"""
        return await self.create({
            "id": id,
            "title": title,
            "dept": dept,
            "credits": credits,
            "cost": _money(cost),
        })

    async def view_courses(self) -> ListResult:
        return await self.get_multi()

    async def update_course(
        self,
        id: int,
        new_title: str,
        new_dept: int,
        new_credits: int,
        new_cost: Cost
    ) -> OperationResult:
        return await self.update_where(
            {
                "title": new_title,
                "dept": new_dept,
                "credits": new_credits,
                "cost": _money(new_cost),
            },
            self.table.c.id == id,
        )

    async def delete_course(self, id: int) -> OperationResult:
        return await self.delete(id)
