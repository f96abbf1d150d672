# registrar/core/exceptions.py
"""Custom exceptions for the registrar HTTP layer."""
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional
import logging

from ..schemas.results import (
    NO_MATCHING_ID,
    NO_ROWS_AFFECTED,
    RULE_VIOLATIONS,
    OperationResult,
)

logger = logging.getLogger(__name__)


class RegistrarException(HTTPException):
    """Base exception for the registrar application."""
    def __init__(
        self,
        status_code: int,
        detail: Any,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class RecordNotFound(RegistrarException):
    """Raised when a mutation matched no rows."""
    def __init__(self, message: str):
        super().__init__(
            status_code=404,
            detail={"error": "Not Found", "message": message}
        )


class BusinessRuleViolation(RegistrarException):
    """Raised when a semester or student guard refused the write."""
    def __init__(self, message: str):
        super().__init__(
            status_code=409,
            detail={"error": "Business Rule Violation", "message": message}
        )


class StoreRejection(RegistrarException):
    """Raised when the database rejected the statement."""
    def __init__(self, message: str):
        super().__init__(
            status_code=400,
            detail={"error": "Database Rejected Statement", "message": message}
        )


class DatabaseError(RegistrarException):
    """Raised when a read failed without a message."""
    def __init__(self, message: str = "Query failed"):
        super().__init__(
            status_code=500,
            detail={"error": "Database Error", "message": message}
        )


def raise_for_result(result: OperationResult) -> None:
    """Translate a failed operation result into the matching HTTP error."""
    if result.success:
        return
    if result.detail is None:
        raise DatabaseError()
    if result.detail in (NO_ROWS_AFFECTED, NO_MATCHING_ID):
        raise RecordNotFound(result.detail)
    if result.detail in RULE_VIOLATIONS:
        raise BusinessRuleViolation(result.detail)
    raise StoreRejection(result.detail)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.error(f"Unexpected error: {str(exc)} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "type": "InternalError"}
    )


def rows_or_raise(result):
    """Return the rows of a read, or raise when the read failed."""
    if isinstance(result, OperationResult):
        raise DatabaseError()
    return result
