# registrar/core/executor.py
"""Query executor: runs one statement against the store and reports the outcome as a value."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def store_message(exc: SQLAlchemyError) -> str:
    """Extract the driver's human-readable message from a SQLAlchemy error.

    SQLAlchemy wraps the DBAPI exception in ``exc.orig``. The asyncpg adapter
    wraps it once more, keeping the asyncpg exception as ``__cause__``.
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return str(exc)
    cause = orig.__cause__
    return str(cause) if cause is not None else str(orig)


class QueryExecutor:
    """Executes statements on a single shared connection.

    Each statement runs in its own transaction: the connection is committed
    after success and rolled back after failure. Errors never propagate; they
    come back in ``QueryResult.error``.
    """

    def __init__(self, conn: AsyncConnection):
        self.conn = conn

    async def execute(self, statement, parameters: Optional[Dict[str, Any]] = None) -> QueryResult:
        try:
            if parameters is None:
                result = await self.conn.execute(statement)
            else:
                result = await self.conn.execute(statement, parameters)
            rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
            rowcount = result.rowcount
            await self.conn.commit()
        except SQLAlchemyError as e:
            message = store_message(e)
            logger.warning("Statement rejected by store: %s", message)
            await self.conn.rollback()
            return QueryResult(error=message)
        return QueryResult(rows=rows, rowcount=rowcount)
