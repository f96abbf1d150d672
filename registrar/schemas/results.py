from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel

NO_ROWS_AFFECTED = "No rows affected"
NO_MATCHING_ID = "No matching id"

NEXT_IS_CURRENT = "Next semester cannot be current semester"
CURRENT_IS_NEXT = "Current semester cannot be next semester"
OUTSIDE_ACTIVE_SEMESTERS = "Desired year or semester does not belong to the current or next semesters"
NOT_NEXT_SEMESTER = "Year or semester does not belong to the next semester"

GRADUATION_NOT_REGISTERED = "Not registered as a student anymore"
GRADUATION_ON_PROBATION = "Student on probation"
PROBATION_NOT_REGISTERED = "Student not registered anymore"
PROBATION_ALREADY = "Student already on probation"
PROBATION_NOT_ON = "Student not on probation"

RULE_VIOLATIONS = frozenset({
    NEXT_IS_CURRENT,
    CURRENT_IS_NEXT,
    OUTSIDE_ACTIVE_SEMESTERS,
    NOT_NEXT_SEMESTER,
    GRADUATION_NOT_REGISTERED,
    GRADUATION_ON_PROBATION,
    PROBATION_NOT_REGISTERED,
    PROBATION_ALREADY,
    PROBATION_NOT_ON,
})


class OperationResult(BaseModel):
    """Outcome of a write: a success flag plus an optional failure detail."""
    success: bool
    detail: Optional[str] = None

    @classmethod
    def ok(cls) -> "OperationResult":
        return cls(success=True)

    @classmethod
    def fail(cls, detail: Optional[str] = None) -> "OperationResult":
        return cls(success=False, detail=detail)


# Reads return the rows, or a bare failure when the query errored.
Rows = List[Dict[str, Any]]
ListResult = Union[Rows, OperationResult]
