# registrar/services/grade_service.py
from .base_service import BaseService
from ..core.executor import QueryExecutor
from ..models.grade import Grade
from ..schemas.results import ListResult, OperationResult


class GradeService(BaseService[Grade]):
    def __init__(self, executor: QueryExecutor):
        super().__init__(Grade, executor)

    async def create_grade(self, name: str) -> OperationResult:
        """Create a grade type (e.g. 'A', 'B', 'F')"""
        return await self.create({"name": name})

    async def get_grades(self) -> ListResult:
        return await self.get_multi()

    async def delete_grade(self, name: str) -> OperationResult:
        return await self.delete(name)
