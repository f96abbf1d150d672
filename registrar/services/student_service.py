# registrar/services/student_service.py
from sqlalchemy import select

from .base_service import BaseService
from ..core.executor import QueryExecutor
from ..models.student import Student
from ..schemas.results import (
    GRADUATION_NOT_REGISTERED,
    GRADUATION_ON_PROBATION,
    NO_MATCHING_ID,
    PROBATION_ALREADY,
    PROBATION_NOT_ON,
    PROBATION_NOT_REGISTERED,
    ListResult,
    OperationResult,
)


class StudentService(BaseService[Student]):
    def __init__(self, executor: QueryExecutor):
        super().__init__(Student, executor)

    async def create_student(self, id: int, name: str, ssn: int) -> OperationResult:
        """Create a registered student with no credits and no probation"""
        return await self.create({
            "id": id,
            "name": name,
            "credits": 0,
            "registered": True,
            "probation": False,
            "ssn": ssn,
        })

    async def get_students(self) -> ListResult:
        return await self.get_multi()

    async def _status(self, id: int):
        """(registered, probation) row for the student, or the failure to return"""
        c = self.table.c
        result = await self.executor.execute(
            select(c.registered, c.probation).where(c.id == id)
        )
        if not result.ok:
            return None, OperationResult.fail(result.error)
        if not result.rows:
            return None, OperationResult.fail(NO_MATCHING_ID)
        return result.rows[0], None

    async def assign_graduation(self, id: int) -> OperationResult:
        """Deregister a student who is registered and not on probation"""
        status, failure = await self._status(id)
        if failure is not None:
            return failure
        if not status["registered"]:
            return OperationResult.fail(GRADUATION_NOT_REGISTERED)
        if status["probation"]:
            return OperationResult.fail(GRADUATION_ON_PROBATION)
        return await self.update_where({"registered": False}, self.table.c.id == id)

    async def assign_probation(self, id: int) -> OperationResult:
        status, failure = await self._status(id)
        if failure is not None:
            return failure
        if not status["registered"]:
            return OperationResult.fail(PROBATION_NOT_REGISTERED)
        if status["probation"]:
            return OperationResult.fail(PROBATION_ALREADY)
        return await self.update_where({"probation": True}, self.table.c.id == id)

    async def remove_probation(self, id: int) -> OperationResult:
        status, failure = await self._status(id)
        if failure is not None:
            return failure
        if not status["registered"]:
            return OperationResult.fail(PROBATION_NOT_REGISTERED)
        if not status["probation"]:
            return OperationResult.fail(PROBATION_NOT_ON)
        return await self.update_where({"probation": False}, self.table.c.id == id)
