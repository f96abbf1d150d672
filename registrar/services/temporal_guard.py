# registrar/services/temporal_guard.py
"""Checks a (year, semester) pair against the active current and next semesters.

Every check is the read half of a guard-then-write: it returns a successful
result when the caller may go ahead with its write, or the failure to hand
back unchanged. The read and the later write are separate round-trips with no
transaction around them, so a concurrent change to the semester logs between
the two is not detected.
"""
from .semester_service import SemesterService, same_semester
from ..schemas.results import (
    CURRENT_IS_NEXT,
    NEXT_IS_CURRENT,
    NOT_NEXT_SEMESTER,
    OUTSIDE_ACTIVE_SEMESTERS,
    OperationResult,
)


class TemporalGuard:
    def __init__(self, semesters: SemesterService):
        self.semesters = semesters

    async def _active(self, log):
        result = await self.semesters.read_active(log)
        if not result.ok:
            return None, OperationResult.fail(result.error)
        return (result.rows[0] if result.rows else None), None

    async def check_next_candidate(self, name: str, year: int) -> OperationResult:
        """The next semester may not be the active current semester"""
        current, failure = await self._active(self.semesters.current_log)
        if failure is not None:
            return failure
        if same_semester(current, name, year):
            return OperationResult.fail(NEXT_IS_CURRENT)
        return OperationResult.ok()

    async def check_current_candidate(self, name: str, year: int) -> OperationResult:
        """The current semester may not be the active next semester"""
        upcoming, failure = await self._active(self.semesters.next_log)
        if failure is not None:
            return failure
        if same_semester(upcoming, name, year):
            return OperationResult.fail(CURRENT_IS_NEXT)
        return OperationResult.ok()

    async def check_active_target(self, year: int, semester: str) -> OperationResult:
        """Class writes must target the current or the next semester"""
        current, failure = await self._active(self.semesters.current_log)
        if failure is not None:
            return failure
        upcoming, failure = await self._active(self.semesters.next_log)
        if failure is not None:
            return failure
        if not (same_semester(current, semester, year) or same_semester(upcoming, semester, year)):
            return OperationResult.fail(OUTSIDE_ACTIVE_SEMESTERS)
        return OperationResult.ok()

    async def check_deletable(self, year: int, semester: str) -> OperationResult:
        """Only classes of the next semester may be deleted"""
        upcoming, failure = await self._active(self.semesters.next_log)
        if failure is not None:
            return failure
        if not same_semester(upcoming, semester, year):
            return OperationResult.fail(NOT_NEXT_SEMESTER)
        return OperationResult.ok()
