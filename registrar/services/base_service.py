# registrar/services/base_service.py
"""Base service with common CRUD operations."""
from sqlalchemy import select, insert, update, delete
from typing import Type, Any, Dict, TypeVar, Generic

from ..core.executor import QueryExecutor, QueryResult
from ..schemas.results import NO_ROWS_AFFECTED, ListResult, OperationResult

# Define generic type
T = TypeVar('T')

class BaseService(Generic[T]):
    def __init__(self, model: Type[T], executor: QueryExecutor):
        self.model = model
        self.table = model.__table__
        self.executor = executor

    @property
    def key(self):
        return next(iter(self.table.primary_key.columns))

    async def get_multi(self) -> ListResult:
        """All rows, or a bare failure when the query errored"""
        result = await self.executor.execute(select(self.table))
        if not result.ok:
            return OperationResult.fail()
        return result.rows

    async def create(self, obj_in: Dict[str, Any]) -> OperationResult:
        result = await self.executor.execute(insert(self.table).values(**obj_in))
        return self._written(result)

    async def update_where(self, values: Dict[str, Any], *criteria) -> OperationResult:
        stmt = update(self.table).where(*criteria).values(**values)
        return self._affected(await self.executor.execute(stmt))

    async def delete_where(self, *criteria) -> OperationResult:
        stmt = delete(self.table).where(*criteria)
        return self._affected(await self.executor.execute(stmt))

    async def delete(self, key: Any) -> OperationResult:
        return await self.delete_where(self.key == key)

    @staticmethod
    def _written(result: QueryResult) -> OperationResult:
        if not result.ok:
            return OperationResult.fail(result.error)
        return OperationResult.ok()

    @staticmethod
    def _affected(result: QueryResult) -> OperationResult:
        if not result.ok:
            return OperationResult.fail(result.error)
        if result.rowcount > 0:
            return OperationResult.ok()
        return OperationResult.fail(NO_ROWS_AFFECTED)
