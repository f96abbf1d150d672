# registrar/services/account_type_service.py
from .base_service import BaseService
from ..core.executor import QueryExecutor
from ..models.account_type import AccountType
from ..schemas.results import ListResult, OperationResult


class AccountTypeService(BaseService[AccountType]):
    def __init__(self, executor: QueryExecutor):
        super().__init__(AccountType, executor)

    async def create_account_type(self, name: str) -> OperationResult:
        """Create an account type (e.g. Student, Administrator)"""
        return await self.create({"name": name})

    async def get_account_types(self) -> ListResult:
        return await self.get_multi()

    async def delete_account_type(self, name: str) -> OperationResult:
        return await self.delete(name)
