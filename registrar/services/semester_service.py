# registrar/services/semester_service.py
"""Semester labels plus the append-only current/next semester logs."""
from typing import Optional, Union

from sqlalchemy import insert, select

from .base_service import BaseService
from ..core.executor import QueryExecutor, QueryResult
from ..models.semester import Semester, CurrentSemester, NextSemester
from ..schemas.results import ListResult, OperationResult

# Active log entry, None for an empty log, or a bare failure
ActiveEntry = Union[dict, None, OperationResult]


class SemesterService(BaseService[Semester]):
    def __init__(self, executor: QueryExecutor):
        super().__init__(Semester, executor)
        self.current_log = CurrentSemester.__table__
        self.next_log = NextSemester.__table__

    async def create_semester(self, name: str) -> OperationResult:
        """Create a semester label (e.g. 'Winter', 'Spring', 'Summer', 'Fall')"""
        return await self.create({"name": name})

    async def get_semesters(self) -> ListResult:
        return await self.get_multi()

    async def delete_semester(self, name: str) -> OperationResult:
        return await self.delete(name)

    async def read_active(self, log) -> QueryResult:
        """Newest entry of a semester log; insertion id breaks timestamp ties"""
        stmt = (
            select(log.c.name, log.c.year)
            .order_by(log.c.date_added.desc(), log.c.id.desc())
            .limit(1)
        )
        return await self.executor.execute(stmt)

    async def get_current_semester(self) -> ActiveEntry:
        return _active_entry(await self.read_active(self.current_log))

    async def get_next_semester(self) -> ActiveEntry:
        return _active_entry(await self.read_active(self.next_log))

    async def append_current(self, name: str, year: int) -> OperationResult:
        return await self._append(self.current_log, name, year)

    async def append_next(self, name: str, year: int) -> OperationResult:
        return await self._append(self.next_log, name, year)

    async def _append(self, log, name: str, year: int) -> OperationResult:
        # date_added is stamped by the store
        stmt = insert(log).values(name=name, year=year)
        return self._written(await self.executor.execute(stmt))


def _active_entry(result: QueryResult) -> ActiveEntry:
    if not result.ok:
        return OperationResult.fail()
    return result.rows[0] if result.rows else None


def same_semester(entry: Optional[dict], name: str, year: int) -> bool:
    """True when a log entry names exactly this semester and year"""
    if entry is None:
        return False
    return entry["name"] == name and entry["year"] == year
