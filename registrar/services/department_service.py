# registrar/services/department_service.py
from typing import Optional

from .base_service import BaseService
from ..core.executor import QueryExecutor
from ..models.department import Department
from ..schemas.results import ListResult, OperationResult


class DepartmentService(BaseService[Department]):
    def __init__(self, executor: QueryExecutor):
        super().__init__(Department, executor)

    async def create_department(self, id: Optional[int], name: str) -> OperationResult:
        """Create a department; without an id the store assigns one"""
        if id is None:
            return await self.create({"name": name})
        return await self.create({"id": id, "name": name})

    async def get_departments(self) -> ListResult:
        return await self.get_multi()

    async def delete_department(self, id: int) -> OperationResult:
        return await self.delete(id)
