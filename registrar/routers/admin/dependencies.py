from fastapi import Depends

from ...core.database import get_executor
from ...core.executor import QueryExecutor
from ...services.administrator import Administrator


async def get_administrator(executor: QueryExecutor = Depends(get_executor)) -> Administrator:
    return Administrator(executor)
