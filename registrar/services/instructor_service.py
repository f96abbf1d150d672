# registrar/services/instructor_service.py
from typing import Optional

from .base_service import BaseService
from ..core.executor import QueryExecutor
from ..models.instructor import Instructor
from ..schemas.results import ListResult, OperationResult


class InstructorService(BaseService[Instructor]):
    def __init__(self, executor: QueryExecutor):
        super().__init__(Instructor, executor)

    async def create_instructor(self, id: int, name: Optional[str], email: Optional[str]) -> OperationResult:
        """Create an instructor; the id is required and the email must be unused"""
        return await self.create({"id": id, "name": name, "email": email})

    async def get_instructors(self) -> ListResult:
        return await self.get_multi()

    async def delete_instructor(self, id: int) -> OperationResult:
        return await self.delete(id)
